# auth_utils.py

# Admin session gate.
# - Credentials live in the "admins" collection and are compared as plain
#   text (see DESIGN.md, this needs hashed passwords before real use).
# - The signed Starlette session cookie carries the logged-in flag.

import logging

from fastapi import Request

from storage import find_admin

logger = logging.getLogger(__name__)

SESSION_KEY = "cinezuva_admin"


def is_authenticated(request: Request) -> bool:
    return request.session.get(SESSION_KEY) is True


async def login(request: Request, email: str, password: str) -> bool:
    """
    Check email + password and mark the session as admin on success.
    "No such user" and "wrong password" give the same False.
    """
    if not await find_admin(email, password):
        logger.info("Admin login rejected")
        return False

    request.session[SESSION_KEY] = True
    logger.info("Admin logged in")
    return True


def logout(request: Request) -> None:
    request.session.clear()
