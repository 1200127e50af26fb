from .cli import module_cli_entry_point

module_cli_entry_point()
