from typing import Sequence
import random
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

def reference_digits(value: int, base: int, count: int) -> Sequence[int]:
    digits = []
    for _ in range(count):
        digits.append(value % base)
        value //= base
    return digits

def reference_capacity(base: int, bits: int) -> int:
    if base == 2:
        return bits
    max_value = 2**bits - 1
    count = 0
    while max_value >= base:
        max_value //= base
        count += 1
    return count

def bases() -> Sequence[int]:
    return [2, 3, 4, 5, 7, 10, 16, 36, 100, 127, 128]

def rand_values(rng: random.Random, upper: int, num: int) -> Sequence[int]:
    return [0, upper] + [rng.randint(0, upper) for _ in range(num)]
