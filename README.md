# algokata

algokata collects classic algorithm exercises and a few small data structures built by hand. It is plain Python and has no dependencies. The code is written to be read, practised on and tested.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Contents |
| --- | --- |
| `algokata.arrays` | `max_profit`, `find_numbers`, `number_of_steps`, `running_sum`, `majority_element`, `build_array`, `contains_duplicate`, `remove_duplicates`, `missing_number`, `remove_element`, `move_zeroes`, `binary_search`, `pivot_index`, `merge_intervals` |
| `algokata.strings` | `is_palindrome`, `is_valid_parentheses`, `is_anagram`, `reverse_string`, `character_replacement`, `group_anagrams`, `reverse_str`, `replace_number` |
| `algokata.linked_lists` | `ListNode`, `from_values`, `to_values`, `format_list`, `has_cycle`, `reorder_list`, `remove_nth_from_end`, `reverse_list`, `merge_two_lists` |
| `algokata.tree` | `TreeNode`, `add_left`, `add_right`, `preorder`, `inorder`, `postorder` |
| `algokata.bounded` | `Stack` and `Queue`, each with a fixed capacity |
| `algokata.dynamic_array` | `DynamicArray`, whose capacity doubles when it is full |
| `algokata.single_linked` | `SinglyLinkedList` |
| `algokata.double_linked` | `DoublyLinkedList` |

Some functions change their argument in place, as the exercises require. `remove_duplicates` and `remove_element` rewrite the front of the list and return how many items are kept. `move_zeroes` and `reverse_string` return `None`.

## Examples

```python
from algokata.arrays import max_profit, merge_intervals
from algokata.strings import is_valid_parentheses, replace_number

max_profit([7, 1, 5, 3, 6, 4])                       # 5
merge_intervals([[1, 3], [2, 6], [8, 10], [12, 16]])  # [[1, 6], [8, 10], [12, 16]]
is_valid_parentheses("{[]}")                          # True
replace_number("a1b2c3")                              # "anumberbnumbercnumber"
```

Linked lists:

```python
from algokata.linked_lists import from_values, to_values, reorder_list, format_list

head = from_values([1, 2, 3, 4, 5, 6])
reorder_list(head)
to_values(head)      # [1, 6, 2, 5, 3, 4]
format_list(head)    # "1 -> 6 -> 2 -> 5 -> 3 -> 4 -> NULL"
```

Binary tree traversals are generators:

```python
from algokata.tree import TreeNode, add_left, add_right, preorder, inorder, postorder

root = TreeNode(1)
two = add_left(root, 2)
add_right(root, 3)
add_left(two, 4)
add_right(two, 5)

list(preorder(root))   # [1, 2, 4, 5, 3]
list(inorder(root))    # [4, 2, 5, 1, 3]
list(postorder(root))  # [4, 5, 2, 3, 1]
```

Containers:

```python
from algokata.bounded import Stack, Queue
from algokata.dynamic_array import DynamicArray
from algokata.single_linked import SinglyLinkedList
from algokata.double_linked import DoublyLinkedList

stack = Stack(10)
stack.push(10)
stack.push(20)
stack.top()            # 20
stack.pop()            # 20
len(stack)             # 1

queue = Queue(5)
queue.enqueue(10)
queue.enqueue(20)
queue.peek()           # 10
queue.dequeue()        # 10

array = DynamicArray(2)
for value in (10, 20, 30):
    array.push_back(value)
array.capacity()       # 4
array[1] = 99
array.pop_back()       # 30

single = SinglyLinkedList()
for value in (10, 20, 30):
    single.append(value)
single.remove(20)
str(single)            # "head|10|30|NULL"

items = DoublyLinkedList()
for value in (10, 20, 30):
    items.append(value)
items.format()             # "Head|10|20|30|Tail"
items.format_reversed()    # "Tail|30|20|10|Head"
```

## Errors

- `Stack.push` and `Queue.enqueue` raise `OverflowError` when the container is full.
- `Stack.pop`, `Stack.top`, `Queue.dequeue` and `Queue.peek` raise `IndexError` when the container is empty. They do not return sentinel values.
- `DynamicArray` raises `IndexError` when an index is out of range and when `pop_back` is called on an empty array.
- `remove_nth_from_end`, `reverse_str`, `missing_number` and `find_numbers` raise `ValueError` when given input they cannot handle.

## Limitations

algokata is a library only. It provides no command-line program, and it has no input or output beyond the values that its functions return.