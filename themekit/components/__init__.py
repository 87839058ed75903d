# themekit - Atomic components
