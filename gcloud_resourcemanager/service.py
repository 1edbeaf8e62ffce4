class ResourceManager:
    def __init__(self, options):
        self.options = options

    def list_projects(self, filter=None):
        rpc = self.options.rpc()
        projects = []
        page_token = None
        while True:
            resp = rpc.projects().list(filter=filter, pageToken=page_token).execute()
            projects.extend(resp.get("projects", []))
            page_token = resp.get("nextPageToken")
            if not page_token:
                return projects
