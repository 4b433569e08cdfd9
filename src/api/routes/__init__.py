"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (discovery, planejamento, admin, health)
- Validação inicial de request (pydantic)
- Delegação para use cases
- Mapeamento de erros para respostas HTTP

Estrutura:
- routes/discovery/: sessões, chat por categoria, ingestão de arquivos
- routes/planning/: plano de execução, histórico e SOW builder
- routes/admin/: configuração de discovery
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
