# sortsteps

Classic sorting algorithms that show their work. Each time an algorithm
changes the order of the data, it can report the current state, so you can
follow a sort one step at a time.

## Linked lists

`sortsteps.linked.DoublyLinkedList` is a doubly linked list of integers built
from any iterable:

```python
from sortsteps.linked import DoublyLinkedList

linked = DoublyLinkedList([19, 48, 99, 71, 13])
list(linked)      # [19, 48, 99, 71, 13]
len(linked)       # 5
linked.format()   # "19, 48, 99, 71, 13"
```

- `nodes()` yields the `Node` objects from head to tail. Each node has `n`,
  `prev` and `next`.
- `swap_adjacent(first, second)` swaps two neighbouring nodes in place.
  `first` must come directly before `second`, or `ValueError` is raised.

## Linked-list sorts

`sortsteps.list_sorts` sorts a `DoublyLinkedList` in place. It relinks the
nodes and never changes the values stored in them:

- `insertion_sort_list(linked, on_step=None)`
- `cocktail_sort_list(linked, on_step=None)`, a cocktail shaker sort

If `on_step` is given, it is called with the list after every swap:

```python
from sortsteps.linked import DoublyLinkedList
from sortsteps.list_sorts import insertion_sort_list

linked = DoublyLinkedList([19, 48, 99, 71, 13])
insertion_sort_list(linked, lambda lst: print(lst.format()))
```

## Reporting

`sortsteps.reporting` formats integer sequences as comma-separated lines:

- `format_values(values)` returns a string such as `"1, 2, 3"`.
- `print_values(values, file=None)` writes that line to `file`. With no
  `file`, it writes to standard output.

## Card decks

`sortsteps.deck` has a `Kind` enum with the suits `SPADE`, `HEART`, `CLUB`
and `DIAMOND`, in that order, and a frozen `Card(value, kind)` dataclass.
Card values are `"Ace"`, `"2"` to `"10"`, `"Jack"`, `"Queen"` and `"King"`.

- `card_value(value)` returns 0 for `"Ace"` up to 12 for `"King"`. It raises
  `ValueError` for an unknown value.
- `compare_cards(first, second)` returns a negative, zero or positive number.
  Cards are compared by suit first, then by value.
- `sort_deck(deck)` sorts a mutable sequence of cards in place, in that same
  order.

## What this package does not do

There are no array sorts (bubble, selection, quick or shell sort) that work
on plain lists, and there is no command-line demonstration. Everything is
used as a library from Python.

## Tests

```
pip install -e .[test]
pytest
```