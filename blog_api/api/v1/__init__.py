from .auth_controller import router as auth_router
from .post_controller import router as post_router
from .error_handlers import register_exception_handlers


__all__ = ["auth_router", "post_router", "register_exception_handlers"]
