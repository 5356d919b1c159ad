# coredrills

Small, self-contained building blocks that come up again and again in
systems and embedded-style code, written in plain Python with no third-party
dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `coredrills.bits` | 32-bit helpers: `bin32`, `set_bit`, `clear_bit`, `toggle_bit`, `test_bit`, `low_mask`, `lowest_set_bit`, `clear_lowest_set_bit`, `popcount`, `parity`, `xor_swap`, `pack_argb` / `unpack_argb`, `write_field` / `read_field`; the `Permission` flags; `RegisterBank`, a simulated block of 32-bit registers with `read`, `write`, `set_bits`, `clear_bits`, `write_masked` and a `critical_section()` context manager; `MmioDevice` with `enable()` and `is_ready()` |
| `coredrills.ticks` | `ticks_to_ns`, `ns_to_ticks`, wrap-safe `elapsed_ticks`, `read_timer` (tear-free read of a split 64-bit counter), `read_timer_unchecked`, and `SplitCounter` |
| `coredrills.ringbuffer` | `UartTx` (drop-new transmit FIFO counting rejected characters in `dropped`), `Ring` (power-of-two ring; `pop` raises `IndexError` when empty) and `InterruptSafeRingBuffer` (holds exactly `capacity` items; `read` returns `None` when empty) |
| `coredrills.layout` | `Field`, `StructLayout` and `compute_layout` for C-style member offsets, padding, size and packed layouts |
| `coredrills.fixed_queue` | `FixedQueue`, a bounded FIFO that refuses pushes when full |
| `coredrills.linked_list` | `ListNode`, `push_front`, `reverse_list`, `iter_values`, `from_values`, `merge_k_sorted` |
| `coredrills.trees` | `TreeNode`, `bfs`, `dfs_preorder`, `serialize`, `deserialize`, `level_order_with_nulls` |
| `coredrills.driver` | the abstract `DriverAPI` (also a context manager that starts and stops the driver) and a queue-backed `FifoDriver` with `isr_push` |
| `coredrills.median` | `MedianFinder`, running median with two heaps |
| `coredrills.fenwick` | `NumArray`, point update and inclusive range sum |
| `coredrills.pathtrie` | `FileSystem` path trie and `split_path` |
| `coredrills.lru_cache` | `LRUCache`; `get` returns `-1` for a missing key |
| `coredrills.merkle` | `MerkleTree` (SHA-256, odd nodes paired with themselves) and `hash_block` |
| `coredrills.word_search` | `find_words` on a letter grid |
| `coredrills.sync` | `CountingSemaphore`, `BoundedBuffer`, `AtomicInt`, `locked_increment` |
| `coredrills.tasks` | `CancellableTask` (`run` returns `True` when it ended by cancellation) and `TaskScheduler` with priorities and delays; `run` returns the task results in execution order |
| `coredrills.rate_limiter` | sliding-window-log `RateLimiter`; decisions are logged at debug level |
| `coredrills.snowflake` | `SnowflakeIdGenerator`, `decompose_id`, `SnowflakeParts` and `ClockMovedBackwardsError` |
| `coredrills.bsp` | `SimpleBoard` and `MockBoard`, two simulated board-support layers; `MockBoard` drains its UART ring from a background thread and is a context manager that stops that thread |

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## A few examples

```python
from coredrills.bits import bin32, popcount, pack_argb, unpack_argb

bin32(22)                                        # '00000000000000000000000000010110'
popcount(22)                                     # 3
unpack_argb(pack_argb(0xFF, 0x80, 0x40, 0x20))   # (255, 128, 64, 32)
```

```python
from coredrills.ticks import elapsed_ticks, ns_to_ticks

elapsed_ticks(0xFFFFFF00, 0x00000050)   # 336, the counter wrapped
ns_to_ticks(5_000_000, 10_000)          # 500
```

```python
from coredrills.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)     # 1
cache.put(3, 3)  # evicts key 2
cache.get(2)     # -1
```

```python
from coredrills.fenwick import NumArray

nums = NumArray([1, 3, 5])
nums.sum_range(0, 2)   # 9
nums.update(1, 2)
nums.sum_range(0, 2)   # 8
```

```python
from coredrills.layout import Field, compute_layout

header = [Field("type", 1), Field("len", 4), Field("flags", 2)]
compute_layout(header, packed=False).offset_of("len")   # 4
compute_layout(header, packed=True).offset_of("len")    # 1
```

## What it does not do

- It is a library only; it installs no commands.
- Nothing here touches real hardware. `RegisterBank`, `MmioDevice`,
  `SplitCounter`, `SimpleBoard` and `MockBoard` are in-memory simulations;
  the boards write their UART output to a text stream (standard output by
  default).