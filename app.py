# Vercel FastAPI zero-config entrypoint
from distance_api.main import app  # noqa: F401
