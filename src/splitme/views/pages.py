"""The pages mounted by the routing table."""

from splitme.markup import Node, h, title
from splitme.views.props import ViewProps


def _app_bar(heading: str, back: str | None = None) -> Node:
    return h(
        "header",
        {"class_name": "app-bar"},
        h("a", {"href": back, "class_name": "app-bar__back"}, "←") if back else None,
        h("h1", {"class_name": "app-bar__title"}, heading),
    )


def product(props: ViewProps) -> Node:
    t = props.t
    return h(
        "main",
        {"class_name": "product"},
        h("h1", None, t("product.title")),
        h("p", {"class_name": "product__tagline"}, t("product.description.short")),
        h("p", None, t("product.description.long")),
        h("a", {"href": "/accounts", "class_name": "button"}, t("product.cta")),
    )


def account_list(props: ViewProps) -> Node:
    t = props.t
    heading = t("account.list.title")
    return title(
        heading,
        _app_bar(heading),
        h(
            "main",
            {"class_name": "account-list"},
            h("p", {"class_name": "account-list__empty"}, t("account.list.empty")),
            h("a", {"href": "/account/add", "class_name": "button"}, t("account.add.title")),
        ),
    )


def account_add(props: ViewProps) -> Node:
    t = props.t
    heading = t("account.add.title")
    return title(
        heading,
        _app_bar(heading, back="/accounts"),
        h(
            "form",
            {"class_name": "account-form", "method": "post"},
            h("label", {"html_for": "account-name"}, t("account.name")),
            h("input", {"id": "account-name", "name": "name", "type": "text", "required": True}),
            h("button", {"type": "submit"}, t("save")),
        ),
    )


def account_detail(props: ViewProps) -> Node:
    t = props.t
    account_id = props.params["id"]
    heading = t("account.detail.title", id=account_id)
    return title(
        heading,
        _app_bar(heading, back="/accounts"),
        h(
            "main",
            {"class_name": "account-detail", "data_account": account_id},
            h("p", None, t("expense.count", smart_count=0)),
            h(
                "a",
                {"href": f"/account/{account_id}/expense/add", "class_name": "button"},
                t("expense.add.title"),
            ),
        ),
    )


def expense_add(props: ViewProps) -> Node:
    t = props.t
    heading = t("expense.add.title")
    return title(
        heading,
        _app_bar(heading, back=f"/account/{props.params['id']}/expenses"),
        h(
            "form",
            {"class_name": "expense-form", "method": "post"},
            h("label", {"html_for": "expense-amount"}, t("expense.amount")),
            h("input", {"id": "expense-amount", "name": "amount", "type": "number", "step": "0.01"}),
            h("button", {"type": "submit"}, t("save")),
        ),
    )


def settings(props: ViewProps) -> Node:
    t = props.t
    heading = t("settings.title")
    return title(
        heading,
        _app_bar(heading, back="/accounts"),
        h(
            "main",
            {"class_name": "settings"},
            h("h2", None, t("settings.language")),
            h(
                "ul",
                None,
                h("li", None, h("a", {"href": "?locale=en", "hreflang": "en"}, "English")),
                h("li", None, h("a", {"href": "?locale=fr", "hreflang": "fr"}, "Français")),
            ),
        ),
    )
