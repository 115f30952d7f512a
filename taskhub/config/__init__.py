from .settings import Settings, DEFAULT_JWT_SECRET
