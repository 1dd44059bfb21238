#!/usr/bin/env python3
import json, os, subprocess, sys, pathlib

cfg_path = pathlib.Path(os.getenv("SETTINGS_FILE", "local.settings.json"))
with cfg_path.open() as f:
    values = json.load(f)["Values"]

os.environ.update(
    {k: str(v) for k, v in values.items()
     if k in ("CLIENT_ID", "CLIENT_SECRET", "TENANT_ID", "SUBSCRIPTION_ID",
              "REGION", "REPO_URL", "REPO_BRANCH")}
)

print(f"Running slot sample in subscription {values.get('SUBSCRIPTION_ID')} …")
sys.exit(subprocess.call([sys.executable, "-m", "webapp_slots"] + sys.argv[1:]))
