# main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse

from customer_registry import config, routes
from customer_registry.logging_config import LOGGING, configure_logging

configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Customer Registry Service")

# Include the router from routes.py
app.include_router(routes.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer 400 for anything FastAPI could not parse, path id or body."""
    bad_path = any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors())
    detail = "Invalid customer ID" if bad_path else "Invalid request payload"
    log.warning("%s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


@app.get("/", include_in_schema=False)
def serve_index():
    return FileResponse(config.STATIC_DIR / "index.html")


def run():
    import uvicorn

    log.info("Server is starting on port %s...", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=LOGGING)


if __name__ == "__main__":
    run()
