"""aiohttp routes for the Champion Catalog REST API."""

from typing import Any, Dict, Optional

import structlog
from aiohttp import web
from aiohttp.web_request import FileField

from ...application.auth_service import AuthService
from ...application.champion_service import ChampionService
from ...core.entities import UploadedFile
from ...core.errors import (
    ChampionCatalogError,
    InvalidInputError,
    NotFoundError,
    RejectedFileError,
    UnauthorizedError,
)

logger = structlog.get_logger()


def error_response(error: ChampionCatalogError) -> web.Response:
    """Map a domain error to its JSON error response."""
    if isinstance(error, RejectedFileError):
        status = 403
    elif isinstance(error, InvalidInputError):
        status = 400
    elif isinstance(error, UnauthorizedError):
        status = 401
    elif isinstance(error, NotFoundError):
        status = 404
    else:
        status = 500
    return web.json_response({"error": error.message}, status=status)


def internal_error(message: str, error: Exception, **context: Any) -> web.Response:
    logger.error(message, error=str(error), exc_info=True, **context)
    return web.json_response({"error": message}, status=500)


def uploaded_file(field: Any) -> Optional[UploadedFile]:
    """Read a multipart file field into memory. Plain text fields are ignored."""
    if not isinstance(field, FileField):
        return None
    return UploadedFile(
        filename=field.filename or "",
        content_type=field.content_type,
        data=field.file.read(),
    )


def form_text(form: Any, key: str) -> Optional[str]:
    """Get a text field from a submitted form, or None when it is absent.

    Raises:
        InvalidInputError: If the field was sent as a file
    """
    value = form.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidInputError(f"Field '{key}' must be text")
    return value


async def read_json(request: web.Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInputError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise InvalidInputError("Invalid JSON body")
    return body


class ChampionCatalogAPI:
    """HTTP transport mapping requests onto the application services."""

    def __init__(
        self,
        champion_service: ChampionService,
        auth_service: AuthService,
        client_max_size: int = 10 * 1024 * 1024,
    ):
        """Initialize the API.

        Args:
            champion_service: Champion lifecycle operations
            auth_service: Signup, user listing and login
            client_max_size: Largest request body accepted, in bytes
        """
        self.champion_service = champion_service
        self.auth_service = auth_service
        self.app = web.Application(client_max_size=client_max_size)
        self.setup_routes()

    def setup_routes(self):
        """Set up API routes."""
        self.app.router.add_get('/health', self.health)

        # Auth and users
        self.app.router.add_post('/api/auth/login', self.login)
        self.app.router.add_get('/api/users', self.list_users)
        self.app.router.add_post('/api/users', self.create_user)

        # Champions
        self.app.router.add_get('/api/champions', self.list_champions)
        self.app.router.add_get('/api/champions/{name}', self.get_champion)
        self.app.router.add_post('/api/champions', self.create_champion)
        self.app.router.add_put('/api/champions/{name}', self.update_champion)
        self.app.router.add_delete('/api/champions/{name}', self.delete_champion)

    async def health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def login(self, request: web.Request) -> web.Response:
        """POST /api/auth/login"""
        try:
            body = await read_json(request)
            token = await self.auth_service.login(body.get("email"), body.get("password"))
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to log in", e)

        return web.json_response({"accessToken": token})

    async def list_users(self, request: web.Request) -> web.Response:
        """GET /api/users"""
        try:
            users = await self.auth_service.list_users()
        except Exception as e:
            return internal_error("Failed to fetch users", e)

        return web.json_response([user.to_dict() for user in users])

    async def create_user(self, request: web.Request) -> web.Response:
        """POST /api/users"""
        try:
            body = await read_json(request)
            await self.auth_service.signup(body.get("email"), body.get("password"))
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to create user", e)

        return web.json_response({"message": "User created successfully"}, status=201)

    async def list_champions(self, request: web.Request) -> web.Response:
        """GET /api/champions?page&limit"""
        try:
            page = await self.champion_service.list_champions(
                request.query.get("page"), request.query.get("limit")
            )
        except Exception as e:
            return internal_error("Failed to fetch champions", e)

        return web.json_response(page.to_dict())

    async def get_champion(self, request: web.Request) -> web.Response:
        """GET /api/champions/{name}"""
        name = request.match_info['name']
        try:
            champion = await self.champion_service.get_champion(name)
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to fetch champion", e, name=name)

        return web.json_response(champion.to_dict())

    async def create_champion(self, request: web.Request) -> web.Response:
        """POST /api/champions (multipart: name, role, image)"""
        try:
            form = await request.post()
            champion = await self.champion_service.create_champion(
                form_text(form, "name"), form_text(form, "role"), uploaded_file(form.get("image"))
            )
        except web.HTTPRequestEntityTooLarge:
            return error_response(RejectedFileError("File is too large"))
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to upload file or save data", e)

        return web.json_response(
            {"message": "Champion created successfully", "result": champion.to_dict()},
            status=201,
        )

    async def update_champion(self, request: web.Request) -> web.Response:
        """PUT /api/champions/{name} (multipart, every field optional)"""
        name = request.match_info['name']
        try:
            form = await request.post()
            champion = await self.champion_service.update_champion(
                name,
                new_name=form_text(form, "name"),
                role_csv=form_text(form, "role"),
                image=uploaded_file(form.get("image")),
            )
        except web.HTTPRequestEntityTooLarge:
            return error_response(RejectedFileError("File is too large"))
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to update champion", e, name=name)

        return web.json_response(
            {"message": "Champion updated successfully", "updatedChampion": champion.to_dict()}
        )

    async def delete_champion(self, request: web.Request) -> web.Response:
        """DELETE /api/champions/{name}"""
        name = request.match_info['name']
        try:
            await self.champion_service.delete_champion(name)
        except ChampionCatalogError as e:
            return error_response(e)
        except Exception as e:
            return internal_error("Failed to delete champion", e, name=name)

        return web.json_response({"message": "Champion deleted successfully"})
