"""
remote_models.py

BigQuery ML statements for the review enrichment pipeline:
1. Remote models for translation, embeddings and the Gemini text endpoint.
2. ML.TRANSLATE / ML.GENERATE_EMBEDDING / ML.GENERATE_TEXT queries over a source table.
"""

import re

from google.cloud import bigquery

from config import SENTIMENT_LABELS
from registry import PipelineConfig, load_config

TRANSLATION_MODEL = "translation_model"
EMBEDDING_MODEL = "embedding_model"
TEXT_LLM_MODEL = "text_llm_model"


def _sql_string(value: str) -> str:
    """Quotes a value as a BigQuery string literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def qualified_name(cfg: PipelineConfig, name: str) -> str:
    cfg.validate()
    return f"`{cfg.project_id}.{cfg.schema_name}.{name}`"


def connection_ref(cfg: PipelineConfig) -> str:
    cfg.validate()
    return f"`{cfg.remote_connection}`"


def _remote_model_ddl(cfg: PipelineConfig, model: str, option: str, value: str) -> str:
    return (
        f"CREATE OR REPLACE MODEL {qualified_name(cfg, model)}\n"
        f"REMOTE WITH CONNECTION {connection_ref(cfg)}\n"
        f"OPTIONS ({option} = {_sql_string(value)});"
    )


def translation_model_ddl(cfg: PipelineConfig) -> str:
    return _remote_model_ddl(cfg, TRANSLATION_MODEL, "REMOTE_SERVICE_TYPE", cfg.translation_remote_service_type)


def embedding_model_ddl(cfg: PipelineConfig) -> str:
    return _remote_model_ddl(cfg, EMBEDDING_MODEL, "REMOTE_SERVICE_TYPE", cfg.embedding_remote_service_type)


def text_llm_model_ddl(cfg: PipelineConfig) -> str:
    return _remote_model_ddl(cfg, TEXT_LLM_MODEL, "ENDPOINT", cfg.text_llm_endpoint)


def remote_model_ddl(cfg: PipelineConfig) -> list:
    return [translation_model_ddl(cfg), embedding_model_ddl(cfg), text_llm_model_ddl(cfg)]


def translate_query(cfg: PipelineConfig, source_table: str, text_column: str = "text",
                    target_language_code: str = "en") -> str:
    """ML.TRANSLATE over `source_table`, with the text column renamed to text_content."""
    return f"""
    SELECT *
    FROM ML.TRANSLATE(
      MODEL {qualified_name(cfg, TRANSLATION_MODEL)},
      (SELECT *, {text_column} AS text_content FROM {qualified_name(cfg, source_table)}),
      STRUCT('translate_text' AS translate_mode, {_sql_string(target_language_code)} AS target_language_code)
    )
    """


def embedding_query(cfg: PipelineConfig, source_table: str, text_column: str = "text") -> str:
    return f"""
    SELECT *
    FROM ML.GENERATE_EMBEDDING(
      MODEL {qualified_name(cfg, EMBEDDING_MODEL)},
      (SELECT *, {text_column} AS content FROM {qualified_name(cfg, source_table)}),
      STRUCT(TRUE AS flatten_json_output)
    )
    """


def build_sentiment_prompt(text: str, prompt: str = None) -> str:
    """Prefixes caller text with the sentiment classification instruction."""
    if prompt is None:
        prompt = load_config().sentiment_analysis_prompt
    return f"{prompt} {text}"


def sentiment_query(cfg: PipelineConfig, source_table: str, text_column: str = "text",
                    temperature: float = 0.0, max_output_tokens: int = 16) -> str:
    prompt = _sql_string(cfg.sentiment_analysis_prompt)
    return f"""
    SELECT *
    FROM ML.GENERATE_TEXT(
      MODEL {qualified_name(cfg, TEXT_LLM_MODEL)},
      (SELECT *, CONCAT({prompt}, ' ', {text_column}) AS prompt FROM {qualified_name(cfg, source_table)}),
      STRUCT({temperature} AS temperature, {max_output_tokens} AS max_output_tokens, TRUE AS flatten_json_output)
    )
    """


def parse_sentiment_label(response_text):
    """Returns the first known sentiment label in a model response, or None."""
    if not response_text:
        return None
    pattern = r"\b(" + "|".join(SENTIMENT_LABELS) + r")\b"
    match = re.search(pattern, response_text.lower())
    return match.group(1) if match else None


def create_remote_models(cfg: PipelineConfig = None, client: bigquery.Client = None):
    """
    Creates (or replaces) the three remote models in the configured dataset.
    Config is validated before the BigQuery client is touched.
    """
    cfg = (cfg or load_config()).validate()
    client = client or bigquery.Client(project=cfg.project_id)

    for ddl_statement in remote_model_ddl(cfg):
        model_ref = ddl_statement.splitlines()[0].rsplit(" ", 1)[-1]
        print(f"Attempting to create or replace remote model: {model_ref}")
        query_job = client.query(ddl_statement)
        query_job.result()
        print(f"✅ Successfully created or replaced model {model_ref}.")


if __name__ == "__main__":
    import importlib

    import config
    from dotenv import load_dotenv

    load_dotenv()
    # placeholders are read from the environment at import time
    importlib.reload(config)
    create_remote_models()
