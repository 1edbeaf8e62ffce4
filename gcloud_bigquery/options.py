from googleapiclient import discovery

from gcloud_bigquery.service import BigQuery
from gcloud_core.service_options import ServiceOptions

BIGQUERY_SCOPE = "https://www.googleapis.com/auth/bigquery"


def _build_bigquery_rpc(options):
    return discovery.build(
        "bigquery", "v2", credentials=options.credentials, cache_discovery=False
    )


class BigQueryOptions(ServiceOptions):
    """Options for the BigQuery service. A project ID is required."""

    def scopes(self):
        return (BIGQUERY_SCOPE,)

    def default_service_factory(self):
        return BigQuery

    def default_rpc_factory(self):
        return _build_bigquery_rpc
