class BigQuery:
    def __init__(self, options):
        self.options = options

    def list_datasets(self, include_all=False):
        """Return the dataset resources of the configured project."""
        rpc = self.options.rpc()
        datasets = []
        page_token = None
        while True:
            resp = rpc.datasets().list(
                projectId=self.options.project_id,
                all=include_all,
                pageToken=page_token,
            ).execute()
            datasets.extend(resp.get("datasets", []))
            page_token = resp.get("nextPageToken")
            if not page_token:
                return datasets
