"""Use cases de discovery (chat por categoria, sessões, ingestão de arquivos)."""

from .ingest_file import FileIngestResult, IngestFileUseCase
from .process_chat_turn import ChatTurnResult, ProcessChatTurnUseCase
from .sessions import GetSessionUseCase, InitSessionUseCase, UpdateDiscoveryUseCase

__all__ = [
    "ChatTurnResult",
    "FileIngestResult",
    "GetSessionUseCase",
    "IngestFileUseCase",
    "InitSessionUseCase",
    "ProcessChatTurnUseCase",
    "UpdateDiscoveryUseCase",
]
