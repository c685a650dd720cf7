"""
Insight Client - Gemini generateContent integration
===================================================
Turns the current sales list into a single prompt and returns the model's
Markdown report verbatim. One request per call: no retries, no streaming.

API Reference: https://ai.google.dev/api/generate-content
"""
from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

import requests

from config import AppConfig
from data.models import Sale


logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

MISSING_KEY_MESSAGE = "Erro: Chave de API (API_KEY) não configurada no ambiente."
EMPTY_RESPONSE_MESSAGE = "Não foi possível gerar insights no momento."
REQUEST_FAILED_MESSAGE = (
    "Ocorreu um erro ao comunicar com a Inteligência Artificial. Verifique sua conexão ou chave de API."
)
NO_SALES_MESSAGE = "Não há dados de vendas suficientes para gerar uma análise."

PROMPT_TEMPLATE = """
Atue como um Gerente Comercial Sênior de uma administradora de consórcios.
Analise os seguintes dados de vendas (em formato JSON) e forneça um relatório estratégico em Markdown.

Dados de Vendas:
{sales_json}

O relatório deve conter:
1. **Resumo Executivo**: Visão geral rápida da performance.
2. **Análise por Produto**: Qual tipo de consórcio está vendendo mais e qual está parado.
3. **Performance da Equipe**: Destaque quem está indo bem e quem precisa de apoio.
4. **Recomendação Estratégica**: 3 ações práticas para aumentar as vendas no próximo mês.

Seja direto, profissional e use formatação (negrito, listas) para facilitar a leitura.
Escreva em Português do Brasil.
"""


def summarize_sales(sales: Sequence[Sale]) -> str:
    """Compact JSON of the fields the model needs (no ids, no client names)."""
    return json.dumps(
        [
            {
                "consultor": s.consultant_name,
                "tipo": s.type_label,
                "valor": s.value,
                "status": s.status_label,
                "data": s.date,
            }
            for s in sales
        ],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def build_prompt(sales: Sequence[Sale]) -> str:
    return PROMPT_TEMPLATE.format(sales_json=summarize_sales(sales))


def extract_text(data: dict) -> Optional[str]:
    """Concatenated text parts of the first candidate, or None."""
    candidates = data.get("candidates") or []
    if not candidates:
        return None
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    return text or None


class InsightClient:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self._url = f"{API_BASE}/{cfg.gemini_model}:generateContent"

    def is_configured(self) -> bool:
        return bool(self.cfg.gemini_api_key)

    def generate(self, sales: Sequence[Sale]) -> str:
        """
        Returns the report text, or one of the fixed Portuguese error strings.
        Never raises.
        """
        if not self.is_configured():
            return MISSING_KEY_MESSAGE

        try:
            resp = requests.post(
                self._url,
                json={"contents": [{"parts": [{"text": build_prompt(sales)}]}]},
                headers={"x-goog-api-key": self.cfg.gemini_api_key},
                timeout=self.cfg.insights_timeout,
            )
            if resp.status_code >= 300:
                logger.error("Gemini request failed: HTTP %s", resp.status_code)
                return REQUEST_FAILED_MESSAGE
            text = extract_text(resp.json())
        except Exception:
            logger.exception("Gemini request failed")
            return REQUEST_FAILED_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE


def get_insight_client(cfg: AppConfig) -> InsightClient:
    return InsightClient(cfg)
