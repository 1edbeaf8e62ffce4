from .options import BIGQUERY_SCOPE, BigQueryOptions
from .service import BigQuery

__all__ = ["BIGQUERY_SCOPE", "BigQuery", "BigQueryOptions"]
