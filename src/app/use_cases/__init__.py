"""Casos de uso (orquestração sem IO direto; dependências por protocolo)."""
