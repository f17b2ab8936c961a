from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from slide_engine.errors import InvalidTemplateId, TemplateNotFound
from slide_engine.registry import TemplateRegistry
from slide_engine.template import Template
from slide_engine.theme_resolver import DEFAULT_TEMPLATE_CONTEXT


def _template(template_id: str, category: str = "free", price: int = 0) -> Template:
    return Template(
        id=template_id,
        name=template_id.title(),
        context=DEFAULT_TEMPLATE_CONTEXT,
        category=category,
        price=price,
    )


@pytest.fixture
def registry() -> TemplateRegistry:
    reg = TemplateRegistry()
    reg.register(_template("alpha"))
    reg.register(_template("beta"))
    reg.register(_template("gold", category="premium", price=29))
    return reg


def test_lookup(registry) -> None:
    assert registry.get("alpha").name == "Alpha"
    assert registry.get("missing") is None
    assert registry.has("beta")
    assert "gold" in registry
    assert len(registry) == registry.count() == 3


def test_require_lists_available_ids(registry) -> None:
    with pytest.raises(TemplateNotFound) as excinfo:
        registry.require("nope")

    message = str(excinfo.value)
    assert message == "Template 'nope' not found. Available templates: alpha, beta, gold"
    assert excinfo.value.template_id == "nope"
    assert isinstance(excinfo.value, KeyError)


def test_free_and_premium_partition(registry) -> None:
    assert [t.id for t in registry.get_free()] == ["alpha", "beta"]
    assert [t.id for t in registry.get_premium()] == ["gold"]
    assert registry.get("gold").is_premium


@pytest.mark.parametrize("bad_id", ["", "   "])
def test_register_rejects_blank_ids(bad_id) -> None:
    with pytest.raises(InvalidTemplateId):
        TemplateRegistry().register(_template(bad_id))


def test_register_overwrites_with_warning(registry, caplog) -> None:
    replacement = replace(registry.get("alpha"), name="Alpha v2")

    with caplog.at_level(logging.WARNING, logger="slide_engine.registry"):
        registry.register(replacement)

    assert registry.get("alpha").name == "Alpha v2"
    assert registry.count() == 3
    assert "already registered" in caplog.text


def test_unregister_and_clear(registry) -> None:
    assert registry.unregister("beta") is True
    assert registry.unregister("beta") is False
    assert registry.ids() == ["alpha", "gold"]

    registry.clear()
    assert registry.count() == 0
    assert list(registry) == []


def test_iteration_is_a_snapshot(registry) -> None:
    for template in registry:
        registry.unregister(template.id)
    assert registry.count() == 0


def test_describe(registry) -> None:
    assert registry.describe().splitlines() == [
        "Registered templates: 3",
        "  Free (2):",
        "    - alpha: Alpha",
        "    - beta: Beta",
        "  Premium (1):",
        "    - gold: Gold (29)",
    ]


def test_log_info_writes_listing(registry, caplog) -> None:
    caplog.set_level(logging.INFO, logger="slide_engine.registry")
    registry.log_info()

    messages = [record.getMessage() for record in caplog.records]
    assert messages == registry.describe().splitlines()
