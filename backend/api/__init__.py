"""HTTP transport: FastAPI dependencies, helpers and routers."""
