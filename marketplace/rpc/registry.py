"""Maps JSON-RPC method names onto command instances."""

from typing import Dict, Iterable, List

from marketplace.container import ServiceContainer
from marketplace.exceptions import MethodNotFoundException

from .command import RpcCommand
from .commands import (
    ItemCategoriesGetCommand,
    ItemCategoryCreateCommand,
    ItemCategoryGetCommand,
    ItemCategoryRemoveCommand,
    ItemCategoryUpdateCommand,
    PaymentInformationGetCommand,
    PaymentInformationUpdateCommand,
)
from .request import RpcRequest


class HelpCommand(RpcCommand):
    name = "help"

    def __init__(self, registry: "CommandRegistry"):
        super().__init__()
        self.registry = registry

    def execute(self, request: RpcRequest) -> Dict[str, str]:
        return {command.name: command.help() for command in self.registry.commands()}

    def help(self) -> str:
        return "help  -  List the available commands."


class CommandRegistry:
    def __init__(self, commands: Iterable[RpcCommand] = ()):
        self._commands: Dict[str, RpcCommand] = {}
        for command in commands:
            self.register(command)

    def register(self, command: RpcCommand) -> None:
        if command.name in self._commands:
            raise ValueError(f"Command {command.name} is already registered")
        self._commands[command.name] = command

    def get(self, method: str) -> RpcCommand:
        try:
            return self._commands[method]
        except KeyError:
            raise MethodNotFoundException(method)

    def commands(self) -> List[RpcCommand]:
        return sorted(self._commands.values(), key=lambda command: command.name)

    @classmethod
    def default(cls, services: ServiceContainer) -> "CommandRegistry":
        item_category_service = services.item_category_service()
        payment_information_service = services.payment_information_service()

        registry = cls(
            [
                ItemCategoryGetCommand(item_category_service),
                ItemCategoriesGetCommand(item_category_service),
                ItemCategoryCreateCommand(item_category_service),
                ItemCategoryUpdateCommand(item_category_service),
                ItemCategoryRemoveCommand(item_category_service),
                PaymentInformationGetCommand(payment_information_service),
                PaymentInformationUpdateCommand(payment_information_service),
            ]
        )
        registry.register(HelpCommand(registry))
        return registry
