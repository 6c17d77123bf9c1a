from __future__ import annotations

import logging

from boutique_client_sdk import ApiSession, ClientConfig, Product, load_config

from .services.products_service import ProductsService
from .services.returns_service import ReturnsService
from .ui.products.product_edit_form import ProductEditForm
from .ui.products.product_table_view import ProductTableView
from .ui.returns.return_form_view import ReturnFormView
from .ui.shared.notification_center import NotificationCenter
from .ui.shared.query_cache import QueryCache

logger = logging.getLogger(__name__)


class AdminAppBootstrap:
    """Wires one session, query cache and notification center into the views."""

    def __init__(self, config: ClientConfig | None = None, session: ApiSession | None = None) -> None:
        self.config = config or load_config()
        self.session = session or ApiSession(self.config)
        self.cache = QueryCache()
        self.notifications = NotificationCenter()
        self.products_service = ProductsService(self.session)
        self.returns_service = ReturnsService(self.session)
        logger.info("admin_app_bootstrap", extra={"env": self.config.normalized_env})

    def product_table(self) -> ProductTableView:
        view = ProductTableView(
            service=self.products_service,
            cache=self.cache,
            currency_label=self.config.currency_label,
        )
        view.watch()
        return view

    def edit_product(self, product: Product) -> ProductEditForm:
        return ProductEditForm(
            product=product,
            service=self.products_service,
            cache=self.cache,
            notifications=self.notifications,
        )

    def return_form(self) -> ReturnFormView:
        form = ReturnFormView(
            service=self.returns_service,
            cache=self.cache,
            notifications=self.notifications,
            currency_label=self.config.currency_label,
        )
        form.open()
        return form
