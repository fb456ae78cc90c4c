from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from product_badges.core.settings import SHOP_DOMAIN_HEADER


class ShopCORSMiddleware:
    """
    Dos políticas CORS según la ruta:
    - rutas públicas (widget de la tienda): cualquier origen, solo GET, sin credenciales,
      y se permite el header de la tienda (dispara preflight en el navegador);
    - resto (panel): solo los orígenes configurados.
    """

    def __init__(self, app: ASGIApp, public_prefix: str, **admin_options):
        self.public_prefix = public_prefix
        self.admin = CORSMiddleware(app, **admin_options)
        self.public = CORSMiddleware(
            app,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=[SHOP_DOMAIN_HEADER],
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.public_prefix):
            await self.public(scope, receive, send)
        else:
            await self.admin(scope, receive, send)
