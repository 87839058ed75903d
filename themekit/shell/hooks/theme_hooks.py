"""
Theme hook wiring - binds every theme helper to its extension point.

Hook names follow the host's conventions:

    body_class, post_class, comment_form_defaults, get_the_archive_title,
    excerpt_more, the_content_more_link, the_title, get_calendar,
    get_avatar_size                                               (filters)
    wp_head, wp_print_styles                                      (actions)

Localized strings come from the rules' text domain in the request's locale
unless a translator is passed in.
"""

from __future__ import annotations

from collections.abc import Callable

from themekit.components.archive_title import get_archive_title
from themekit.components.classes import body_classes, post_classes
from themekit.components.excerpt import (
    continue_reading_link,
    continue_reading_link_excerpt,
    post_title,
)
from themekit.components.head import (
    StyleQueuePort,
    comment_form_defaults,
    deregister_styles,
    get_avatar_size,
    pingback_header,
)
from themekit.components.icons import change_calendar_nav_arrows
from themekit.core.entities import PageContext
from themekit.core.ports.translator import GettextTranslator, Translator
from themekit.rules.models import ThemeRules
from themekit.shell.hooks.registry import HookRegistry

FILTER_HOOKS = (
    "body_class",
    "post_class",
    "comment_form_defaults",
    "get_the_archive_title",
    "excerpt_more",
    "the_content_more_link",
    "the_title",
    "get_calendar",
    "get_avatar_size",
)
ACTION_HOOKS = ("wp_head", "wp_print_styles")


def translator_for(rules: ThemeRules, locale: str | None = None) -> GettextTranslator:
    """Translator for the rules' text domain, in locale when given (e.g. fr-FR)."""
    languages = [locale.replace("-", "_")] if locale else None
    return GettextTranslator(
        domain=rules.text_domain,
        localedir=rules.locale_dir,
        languages=languages,
    )


def register_theme_hooks(
    registry: HookRegistry,
    ctx: PageContext,
    rules: ThemeRules | None = None,
    translator: Translator | None = None,
    write: Callable[[str], object] | None = None,
    styles: StyleQueuePort | None = None,
) -> HookRegistry:
    """
    Register the theme's filters and actions for one request.

    Args:
        registry: Registry to add callbacks to.
        ctx: The request's page context.
        rules: Theme configuration (defaults when omitted).
        translator: Translator for localized strings (defaults to the rules'
            text domain in ctx.locale).
        write: Sink for markup printed by actions (wp_head).
        styles: Stylesheet queue for wp_print_styles.

    Returns:
        The same registry.
    """
    rules = rules or ThemeRules()
    translator = translator or translator_for(rules, ctx.locale)

    registry.add_filter(
        "body_class",
        lambda classes: body_classes(classes, ctx, rules.primary_menu_location),
    )
    registry.add_filter("post_class", post_classes)

    registry.add_filter(
        "comment_form_defaults",
        lambda defaults: comment_form_defaults(defaults, rules.comments.comment_field_rows),
    )

    # The host's own title is replaced outright
    registry.add_filter(
        "get_the_archive_title",
        lambda _title: get_archive_title(ctx, translator, rules.dates),
    )

    # In an administrative context the host's more-link is kept
    registry.add_filter(
        "excerpt_more",
        lambda more: continue_reading_link_excerpt(ctx, translator) or more,
    )
    registry.add_filter(
        "the_content_more_link",
        lambda link: continue_reading_link(ctx, translator) or link,
    )
    registry.add_filter("the_title", lambda title: post_title(title, translator))

    registry.add_filter(
        "get_calendar",
        lambda html: change_calendar_nav_arrows(html, rules.icons.default_size, registry),
    )
    registry.add_filter("get_avatar_size", lambda _size: get_avatar_size(rules.avatar_size))

    if write is not None:

        def print_pingback_header() -> None:
            html = pingback_header(ctx)
            if html:
                write(html)

        registry.add_action("wp_head", print_pingback_header, accepted_args=0)

    if styles is not None:
        registry.add_action(
            "wp_print_styles",
            lambda: deregister_styles(styles, rules.styles.dequeue),
            priority=rules.styles.dequeue_priority,
            accepted_args=0,
        )

    return registry
