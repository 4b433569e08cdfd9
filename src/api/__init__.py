"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests do front-end de onboarding
- Validar payloads (pydantic)
- Delegar para use cases em app/
- Traduzir erros do domínio em respostas HTTP

Subpastas:
- routes/: endpoints HTTP (discovery, planejamento, admin, health)

NÃO PODE conter: regras de merge, critérios de conclusão, chamadas diretas ao modelo.
"""
