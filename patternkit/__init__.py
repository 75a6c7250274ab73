"""Runnable examples of the classic creational, structural and behavioural design patterns."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "adapter",
    "bridge",
    "builder",
    "chain",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory_method",
    "flyweight",
    "interpreter",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "prototype",
    "proxy",
    "state",
    "strategy",
    "template_method",
    "visitor",
]