import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Keep the app importable without any deployment configuration.
os.environ.setdefault("ALLOWED_ORIGINS", "")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")
os.environ.pop("SENTRY_DSN", None)
