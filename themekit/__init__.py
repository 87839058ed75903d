# themekit - presentation-layer helpers for a content-management theme
