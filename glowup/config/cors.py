"""CORS configuration for the FastAPI application."""

from .environment import IS_PRODUCTION_ENVIRONMENT

# CORS Origins configuration
ALLOWED_ORIGINS = {
    False: [       # Development - local frontends only
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ],
    True: [        # Production - restricted
        "https://glowupdiaries.com",
        "https://www.glowupdiaries.com",
    ]
}

# CORS Methods configuration
ALLOWED_METHODS = [
    "GET",      # Listings, featured content, resources
    "POST",     # Contact form, email, login, admin content
    "DELETE",   # Admin content removal
    "OPTIONS"   # Required for CORS preflight
]

# CORS Headers configuration
ALLOWED_HEADERS = [
    "Content-Type",   # For request bodies
    "Accept",         # For content negotiation
]

# Session cookies must travel with cross-origin admin requests
CORS_CONFIG = {
    "allow_origins": ALLOWED_ORIGINS[IS_PRODUCTION_ENVIRONMENT],
    "allow_credentials": True,
    "allow_methods": ALLOWED_METHODS,
    "allow_headers": ALLOWED_HEADERS,
    "expose_headers": [],
    "max_age": 3600,
}
