from themekit.shell.hooks.registry import DEFAULT_PRIORITY, HookCallback, HookRegistry

__all__ = ["DEFAULT_PRIORITY", "HookCallback", "HookRegistry"]
