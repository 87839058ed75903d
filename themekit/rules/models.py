from pydantic import BaseModel, Field


class DateFormatRules(BaseModel):
    # strftime patterns, except `default` which is a str.format template over `date`
    yearly: str = "%Y"
    monthly: str = "%B %Y"
    default: str = "{date:%B} {date.day}, {date.year}"


class FontRules(BaseModel):
    # Merged over the built-in tables; an empty list disables a locale/surface
    families: dict[str, list[str]] = Field(default_factory=dict)
    elements: dict[str, list[str]] = Field(default_factory=dict)


class IconRules(BaseModel):
    default_size: int = Field(default=24, gt=0)


class CommentRules(BaseModel):
    comment_field_rows: int = Field(default=5, gt=0)


class StyleRules(BaseModel):
    dequeue: list[str] = Field(default_factory=lambda: ["wp-block-library-theme"])
    dequeue_priority: int = 100


class ThemeRules(BaseModel):
    text_domain: str = "themekit"
    primary_menu_location: str = "primary"
    avatar_size: int = Field(default=60, gt=0)
    locale_dir: str | None = None
    dates: DateFormatRules = Field(default_factory=DateFormatRules)
    fonts: FontRules = Field(default_factory=FontRules)
    icons: IconRules = Field(default_factory=IconRules)
    comments: CommentRules = Field(default_factory=CommentRules)
    styles: StyleRules = Field(default_factory=StyleRules)
