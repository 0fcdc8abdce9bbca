from fastapi import FastAPI

from airlog_server.adapters.api.routes import router

app = FastAPI(title="airlog")
app.include_router(router)
