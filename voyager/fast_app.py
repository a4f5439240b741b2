import os
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from dotenv import load_dotenv
load_dotenv()
from voyager.routers import user, trip, join_requests, notifications, chat
from voyager.internal.exceptions import ServiceError
from voyager.db.database import Base, engine
import voyager.db.models  # noqa: F401 registers the tables on Base


logging.basicConfig(
  level=os.getenv('LOG_LEVEL', 'INFO').upper(),
  format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
log = logging.getLogger(__name__)

if os.getenv('CREATE_TABLES', 'true').lower() in ('1', 'true', 'yes'):
  Base.metadata.create_all(bind=engine)


#! app = FastAPI(docs_url=None, redoc_url=None)
# Close the docs in production
app = FastAPI(title="Voyager+")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
  if exc.status_code >= 500:
    log.error(f"{request.method} {request.url.path} failed: {exc.msg}")
  return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/", response_class=PlainTextResponse)
async def root():
  return "Voyager+ Server is running!"


app.include_router(user.router)
app.include_router(trip.router)
app.include_router(join_requests.router)
app.include_router(notifications.router)
app.include_router(chat.router)
