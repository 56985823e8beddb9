from pathlib import Path
import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from plans import PAGE_TITLE, PAGE_SUBTITLE, SAMPLE_HEADING, SAMPLE_PLAN

BASE_DIR = Path(__file__).resolve().parent
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"
HOST = os.getenv("HOST", "127.0.0.1")

app = FastAPI(title=PAGE_TITLE)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")

logging.basicConfig(level=LOG_LEVEL)


def landing_context():
    return {
        "title": PAGE_TITLE,
        "subtitle": PAGE_SUBTITLE,
        "sample_heading": SAMPLE_HEADING,
        "sample_plan": SAMPLE_PLAN,
    }


def render_landing() -> str:
    return templates.get_template("index.html").render(landing_context())


def render_template(request: Request, template: str, status_code: int = 200):
    return templates.TemplateResponse(request, template, {"title": PAGE_TITLE}, status_code=status_code)


def apply_security_headers(resp):
    resp.headers["X-Frame-Options"] = "DENY"
    resp.headers["X-Content-Type-Options"] = "nosniff"
    resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    resp.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
    return resp


@app.on_event("startup")
def on_startup():
    logging.info("%s landing page ready", PAGE_TITLE)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    resp = await call_next(request)
    return apply_security_headers(resp)


@app.exception_handler(404)
def not_found(request: Request, exc):
    return render_template(request, "404.html", status_code=404)


# Runs outside the http middleware, so headers are applied here too.
@app.exception_handler(500)
def server_error(request: Request, exc):
    logging.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return apply_security_headers(render_template(request, "500.html", status_code=500))


@app.get("/", response_class=HTMLResponse)
def home():
    return HTMLResponse(render_landing())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=int(os.getenv("PORT", "8000")), log_level=LOG_LEVEL.lower())
