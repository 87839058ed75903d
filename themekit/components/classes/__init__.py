"""
Classes component - body/post CSS class composition.
"""

from .component import (
    HFEED_CLASS,
    MAIN_NAVIGATION_CLASS,
    POST_ENTRY_CLASS,
    SINGULAR_CLASS,
    body_classes,
    post_classes,
    run,
    run_body_classes,
    run_post_classes,
)
from .models import BodyClassesInput, ClassesOutput, PostClassesInput

__all__ = [
    # Entry points
    "run",
    "run_body_classes",
    "run_post_classes",
    # Input models
    "BodyClassesInput",
    "PostClassesInput",
    # Output models
    "ClassesOutput",
    # Functions
    "body_classes",
    "post_classes",
    # Constants
    "HFEED_CLASS",
    "MAIN_NAVIGATION_CLASS",
    "POST_ENTRY_CLASS",
    "SINGULAR_CLASS",
]
