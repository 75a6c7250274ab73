# patternkit

Compact, self-contained examples of the classic object-oriented design
patterns. Each pattern lives in its own module, shows the participating
roles as ordinary Python classes, and has a small demonstration that
prints to standard output.

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is included

Behavioural patterns

| Module | Main classes |
| --- | --- |
| `patternkit.chain` | `Handler`, `ConcreteHandlerA`, `ConcreteHandlerB` |
| `patternkit.command` | `Command`, `ConcreteCommand`, `Receiver`, `Invoker` |
| `patternkit.interpreter` | `Expression`, `NumberExpression`, `AddExpression`, `SubtractExpression` |
| `patternkit.iterator` | `ConcreteAggregate`, `ConcreteIterator` |
| `patternkit.mediator` | `ConcreteMediator`, `Colleague`, `ConcreteColleagueA`, `ConcreteColleagueB` |
| `patternkit.memento` | `Memento`, `Originator`, `Caretaker` |
| `patternkit.observer` | `Subject`, `ConcreteSubject`, `Observer`, `ConcreteObserverA`, `ConcreteObserverB` |
| `patternkit.state` | `Context`, `State`, `ConcreteStateA`, `ConcreteStateB` |
| `patternkit.strategy` | `Context`, `Strategy`, `ConcreteStrategyA`, `ConcreteStrategyB` |
| `patternkit.template_method` | `AbstractClass`, `ConcreteClassA`, `ConcreteClassB` |
| `patternkit.visitor` | `ObjectStructure`, `Element`, `ElementA`, `ElementB`, `Visitor`, `ConcreteVisitorA`, `ConcreteVisitorB` |

Creational patterns

| Module | Main classes |
| --- | --- |
| `patternkit.abstract_factory` | `AbstractFactory`, `ConcreteFactory1`, `ConcreteFactory2`, `ProductA1`, `ProductA2`, `ProductB1`, `ProductB2` |
| `patternkit.builder` | `Director`, `Builder`, `ConcreteBuilder`, `Product` |
| `patternkit.factory_method` | `Factory`, `ConcreteFactoryA`, `ConcreteFactoryB`, `Product`, `ConcreteProductA`, `ConcreteProductB` |
| `patternkit.prototype` | `Prototype`, `ConcretePrototype` |

Structural patterns

| Module | Main classes |
| --- | --- |
| `patternkit.adapter` | `Target`, `Adaptee`, `Adapter` |
| `patternkit.bridge` | `Abstraction`, `RefinedAbstraction`, `Implementor`, `ConcreteImplementorA`, `ConcreteImplementorB` |
| `patternkit.composite` | `Component`, `Leaf`, `Composite` |
| `patternkit.decorator` | `Component`, `ConcreteComponent`, `Decorator`, `ConcreteDecoratorA`, `ConcreteDecoratorB` |
| `patternkit.facade` | `Facade`, `SubsystemA`, `SubsystemB`, `SubsystemC` |
| `patternkit.flyweight` | `FlyweightFactory`, `Flyweight`, `ConcreteFlyweight` |
| `patternkit.proxy` | `Subject`, `RealSubject`, `Proxy` |

## Running the demonstrations

Each pattern installs a command that runs its demonstration:

```
patternkit-chain
patternkit-command
patternkit-interpreter
patternkit-iterator
patternkit-mediator
patternkit-memento
patternkit-observer
patternkit-state
patternkit-strategy
patternkit-template-method
patternkit-visitor
patternkit-abstract-factory
patternkit-builder
patternkit-factory-method
patternkit-prototype
patternkit-adapter
patternkit-bridge
patternkit-composite
patternkit-decorator
patternkit-facade
patternkit-flyweight
patternkit-proxy
```

The commands take no options. The same demonstrations can be started from
Python by calling each module's `main()` function, which returns `0`.

## Using the classes

### Chain of responsibility

`ConcreteHandlerA` accepts requests from 0 to 9, `ConcreteHandlerB` those
from 10 to 19. `handle_request` prints which handler took the request and
returns that handler, or `None` when the request falls off the end of the
chain.

```python
from patternkit.chain import ConcreteHandlerA, ConcreteHandlerB

first = ConcreteHandlerA()
second = first.set_next(ConcreteHandlerB())

first.handle_request(5) is first    # True
first.handle_request(15) is second  # True
first.handle_request(25)            # None
```

### Interpreter

An expression tree for `(1 + 2) - 3`:

```python
from patternkit.interpreter import AddExpression, NumberExpression, SubtractExpression

expression = SubtractExpression(
    AddExpression(NumberExpression(1), NumberExpression(2)),
    NumberExpression(3),
)
print(expression.interpret())  # 0
```

### Command

`Invoker.execute_commands` runs the queued commands in order and
`Invoker.undo_commands` undoes them newest first; both return the commands
they ran and empty the queue afterwards.

```python
from patternkit.command import ConcreteCommand, Invoker, Receiver

receiver = Receiver()
invoker = Invoker()
invoker.add_command(ConcreteCommand(receiver, "Action1"))
invoker.add_command(ConcreteCommand(receiver, "Action2"))
invoker.undo_commands()  # prints "Receiver: Undoing Action2", then Action1
```

### Memento

`Caretaker.get_memento` pops the newest snapshot, or returns `None` when
none is left.

```python
from patternkit.memento import Caretaker, Originator

originator = Originator()
caretaker = Caretaker()
originator.set_state("State1")
caretaker.add_memento(originator.save_state_to_memento())
originator.set_state("State2")
originator.restore_state_from_memento(caretaker.get_memento())
print(originator.state)  # State1
```

### Flyweight

A flyweight factory hands out one shared object per key:

```python
from patternkit.flyweight import FlyweightFactory

factory = FlyweightFactory()
first = factory.get_flyweight("key1")
again = factory.get_flyweight("key1")
print(first is again)  # True
print(len(factory))    # 1
```

### Return values

Several demonstration methods print a line and also return it, so the
output can be checked without capturing standard output: for example
`Product.show` in `patternkit.builder`, `ConcretePrototype.display`,
`AbstractClass.template_method` (a list of the three step lines),
`ObjectStructure.accept` (one result per element), and
`Proxy.request` and the decorator `operation` methods (lists of lines).

### Errors

- `ConcreteIterator.current_item` raises `IndexError` once the iterator is
  done.
- `Director.construct` raises `RuntimeError` when no builder is set.
- `ConcreteMediator.send_message` raises `RuntimeError` when the colleague
  opposite the sender is not registered; messages from unregistered senders
  are ignored.

## What the package does not do

The modules are teaching examples. Their classes print fixed messages and
hold no real business logic; nothing is stored, read from files or sent
over a network, and the commands only run the fixed demonstrations.