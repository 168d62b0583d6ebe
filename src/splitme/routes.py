"""The application's routing table."""

from splitme.routing import RoutingTable, redirect, view
from splitme.views import pages

ROUTES = RoutingTable(
    [
        view("/", pages.product, name="product"),
        view("/accounts", pages.account_list, name="account-list"),
        redirect("/account", "/accounts"),
        view("/account/add", pages.account_add, name="account-add"),
        redirect("/account/{id}", "/account/{id}/expenses"),
        view("/account/{id}/expenses", pages.account_detail, name="account-detail"),
        view("/account/{id}/expense/add", pages.expense_add, name="expense-add"),
        view("/settings", pages.settings, name="settings"),
    ]
)
