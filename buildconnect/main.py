import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .auth import FirebaseIdentityProvider
from .config import ALLOWED_ORIGINS, LOG_LEVEL
from .database import FirestoreDocumentStore, initialize_firebase
from .domain.bookings.router import router as bookings_router
from .domain.listings.router import router as listings_router
from .domain.payments.router import router as payments_router
from .domain.users.router import router as users_router
from .email_service import EmailService
from .services.razorpay_service import RazorpayService

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

    # Capabilities are built once per process and shared by every request
    firebase_app = initialize_firebase()
    app.state.document_store = FirestoreDocumentStore(firebase_app)
    app.state.identity_provider = FirebaseIdentityProvider(firebase_app)
    app.state.payment_gateway = RazorpayService()

    email_service = EmailService()
    app.state.email_sender = email_service
    # SMTP login check only logs; a failing mail server must not block startup
    await asyncio.to_thread(email_service.verify_connection)

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="BuildConnect API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400), not 422"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(payments_router)
app.include_router(bookings_router)
app.include_router(listings_router)
app.include_router(users_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "BuildConnect Backend is connected to Firebase!"


@app.get("/health")
def health():
    return {"status": "healthy"}
