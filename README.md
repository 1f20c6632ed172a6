# smartvend

A small vending machine simulator. Each machine runs on an extended finite
state machine (`smartvend.efsm.MdaEfsm`) that moves between three states:
`NoCups`, `Idle` and `CoinsInserted` (in `smartvend.states`). The state
machine works only through a `DataStore` (`smartvend.datastore`) and an
`OutputProcessor` (`smartvend.output`). Everything that differs between
machines, such as how amounts are kept or what gets printed, lives in the
strategy objects of `smartvend.strategies`, which a factory from
`smartvend.factory` supplies.

Two machines are provided in `smartvend.machines`:

- `VM1` keeps prices and funds as floats (`FloatDataStore`). It is built
  with `VM1Factory` by default and sells cappuccino and chocolate.
- `VM2` keeps prices and funds as whole units, truncating toward zero
  (`IntDataStore`). It is built with `VM2Factory` by default and sells
  coffee, with sugar or cream.

Each machine reports its current state through its `state_name` property.

## Installation

```
pip install .
```

## Interactive use

```
smartvend
```

The command reads from standard input. It first asks which machine to run
(`1` or `2`), then shows a menu of operations:

| Key | VM1 | VM2 |
|-----|-----|-----|
| 0 | create(price) | create(price) |
| 1 | coin(value) | coin(value) |
| 2 | sugar() | sugar() |
| 3 | chocolate() | coffee() |
| 4 | cappuccino() | coffee() |
| 5 | insert_cups(n) | insert_cups(n) |
| 6 | set_price(price) | set_price(price) |
| 7 | cancel() | cancel() |
| 8 | card(value) | coin(value) |
| q | quit | quit |

For the second machine, amounts typed in are cut to whole units. An
operation the current state does not allow is reported as `[ERROR] ...`
and the session goes on. The session ends on `q` or at the end of input.
Choosing a machine other than `1` or `2` prints `Invalid choice. Exiting...`
and exits with status 1.

## Library use

```python
from smartvend.machines import VM1

vm = VM1()            # same as VM1(VM1Factory())
vm.create(2.5)        # store the price
vm.insert_cups(3)     # NoCups -> Idle
vm.coin(1.0)
vm.coin(2.0)          # enough funds: Idle -> CoinsInserted
vm.sugar()
vm.chocolate()        # dispense, return 0.5 in change, back to Idle
print(vm.state_name)  # Idle
```

Progress is printed to standard output by the states and strategies.

In a state that does not allow an operation, the machine raises
`smartvend.states.TransitionError`; its `operation` and `state` attributes
name the refused operation and the state that refused it. `VM2.cream()`
likewise raises it unless enough has been paid.

## Limitations

- No state accepts `set_price`: it always raises `TransitionError`. The
  price is fixed by `create`, which only the `NoCups` state accepts.
- Machines keep everything in memory; nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```