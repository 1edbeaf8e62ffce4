#!/usr/bin/env python3
"""Startup checks for project and credential discovery.

Reports which source the project ID resolves from, credential path issues, and
missing client libraries. Useful when a service refuses to start with
"A project ID is required".

It returns non-zero when run with `raise_on_error=True` inside CI or local checks.
"""
import importlib
import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from gcloud_core.project_resolver import CREDENTIALS_ENV_NAME, ProjectResolver
from gcloud_core.service_options import APPLICATION_NAME


def _module_available(name: str) -> bool:
    try:
        importlib.import_module(name)
        return True
    except ImportError:
        return False


def run_checks(raise_on_error: bool = True, resolver=None):
    errors = []
    warnings = []

    resolution = (resolver or ProjectResolver()).resolve_with_source()
    if resolution.project_id is None:
        errors.append(
            "Project ID could not be determined: set GCLOUD_PROJECT, "
            "run `gcloud config set project <id>`, or pass project_id explicitly"
        )

    # Credentials file existence
    cred = os.getenv(CREDENTIALS_ENV_NAME)
    if cred:
        cred = cred.strip()
        if not os.path.isabs(cred):
            cred = os.path.abspath(cred)
        if not os.path.isfile(cred):
            errors.append(f"{CREDENTIALS_ENV_NAME} file not found: {cred}")
    else:
        warnings.append(f"{CREDENTIALS_ENV_NAME} is not set; relying on ambient credentials")

    required_modules = [
        ("google.auth", "google-auth"),
        ("googleapiclient", "google-api-python-client"),
        ("pydantic", "pydantic"),
    ]
    for mod, pkg in required_modules:
        if not _module_available(mod):
            errors.append(f"Missing Python module: {mod} (install package: {pkg})")

    report = {
        "errors": errors,
        "warnings": warnings,
        "project_id": resolution.project_id,
        "source": resolution.source,
    }
    if errors and raise_on_error:
        msg = "Startup checks failed:\n" + "\n".join(errors + warnings)
        raise SystemExit(msg)
    return report


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    report = run_checks(raise_on_error=False)
    print(f"STARTUP CHECKS ({APPLICATION_NAME}):")
    print(f"Project: [{report['project_id']}] from {report['source'] or 'nowhere'}")
    print("Errors:", report.get("errors"))
    print("Warnings:", report.get("warnings"))
    if report.get("errors"):
        sys.exit(2)


if __name__ == "__main__":
    main()
