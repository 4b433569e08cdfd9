"""App: orquestração, casos de uso e infraestrutura do serviço.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (chat de discovery, planejamento, admin)
- services/: serviços de aplicação sem IO (merge, critérios, plano, SOW)
- domain/: sessão de onboarding e configuração de discovery
- infra/: implementações concretas de IO (Firestore, Azure OpenAI)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; ai decide; utils apoia.
"""
