# bit_cli/cli/commands/__init__.py
def register_all_commands() -> None:
    """
    Instantiate and register every built-in command into the registry.
    """
    # Delay import to avoid circular dependencies
    from bit_cli.cli.registry import CommandRegistry

    from bit_cli.cli.commands.help import HelpCommand
    from bit_cli.cli.commands.info import InfoCommand
    from bit_cli.cli.commands.save import SaveCommand
    from bit_cli.cli.commands.sync import SyncCommand
    from bit_cli.cli.commands.version import VersionCommand

    CommandRegistry.register(HelpCommand())
    CommandRegistry.register(InfoCommand())
    CommandRegistry.register(SaveCommand())
    CommandRegistry.register(SyncCommand())
    CommandRegistry.register(VersionCommand())
