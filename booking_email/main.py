"""FastAPI Application Entry Point"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from booking_email.config import settings
from booking_email.errors import BookingError
from booking_email.api.routes import booking

# Configure structured logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
)

logger = structlog.get_logger()

VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="Booking Email API",
    description="Forwards website booking requests to the owner by email",
    version=VERSION,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return JSONResponse(
        content={
            "status": "healthy",
            "environment": settings.environment,
            "version": VERSION
        }
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Booking Email API",
        "version": VERSION,
        "docs": "/docs" if settings.is_development else None
    }


# Include routers
app.include_router(booking.router, prefix="/api/v1", tags=["booking"])


# Startup event
@app.on_event("startup")
async def startup_event():
    """Run on application startup"""
    logger.info(
        "application_starting",
        environment=settings.environment,
        email_configured=bool(settings.resend_api_key)
    )


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    logger.info("application_shutting_down")


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    """Render booking errors as {"error": ...} with CORS headers"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=settings.cors_headers
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions"""
    logger.error(
        "uncaught_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=settings.cors_headers
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Booking Email API server")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
