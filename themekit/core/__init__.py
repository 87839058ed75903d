# themekit - Core (entities and ports)
