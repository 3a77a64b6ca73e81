import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import models so the customer table is registered with Base
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, LOG_LEVEL, SEED_DATA_FILE
from .database import Base, engine
from .domain.calendar import router as calendar_router
from .domain.calendar.service import CalendarService, build_calendar_config
from .domain.customers import router as customers_router
from .domain.tickets import router as tickets_router
from .domain.tickets.service import TicketService
from .seed import load_seed_data

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")

    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")

    seed = load_seed_data(SEED_DATA_FILE)
    app.state.calendar_service = CalendarService(
        seed.tasks, build_calendar_config(seed.technicians)
    )
    app.state.ticket_service = TicketService(seed.tickets)

    yield

    logger.info("Application shutting down...")


app = FastAPI(title="Serviceboard API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": exc.errors()})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(calendar_router)
app.include_router(customers_router)
app.include_router(tickets_router)


@app.get("/")
def root():
    return {"message": "Serviceboard API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
