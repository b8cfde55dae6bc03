"""IAM presentation layer.

Registration and login are public; every other context guards its own
routes with ``get_current_user``.
"""

from iam.presentation.routes import router

__all__ = ["router"]
