"""Binary search over the answer: the smallest value that makes a plan feasible."""

from __future__ import annotations

from collections.abc import Sequence


def _hours_within(piles: Sequence[int], h: int, speed: int) -> bool:
    hours = 0
    for pile in piles:
        hours += 1 if pile <= speed else -(-pile // speed)
        if hours > h:
            return False
    return True


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("min_eating_speed() requires at least one pile")
    largest = max(piles)
    if len(piles) == h:
        return largest
    low, high = 1, largest
    while low <= high:
        mid = low + (high - low) // 2
        if _hours_within(piles, h, mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def _bouquets_ready(bloom_day: Sequence[int], m: int, k: int, day: int) -> bool:
    bouquets = flowers = 0
    for bloom in bloom_day:
        if bloom <= day:
            flowers += 1
            if flowers == k:
                bouquets += 1
                flowers = 0
                if bouquets >= m:
                    return True
        else:
            flowers = 0
    return False


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which ``m`` bouquets of ``k`` adjacent flowers can be made.

    Returns -1 when there are too few flowers for that many bouquets.
    """
    if m * k > len(bloom_day):
        return -1
    if not bloom_day:
        raise ValueError("min_days() requires at least one flower")
    low, high = min(bloom_day), max(bloom_day)
    while low <= high:
        mid = low + (high - low) // 2
        if _bouquets_ready(bloom_day, m, k, mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def _ships_in(weights: Sequence[int], days: int, capacity: int) -> bool:
    used = 1
    load = 0
    for weight in weights:
        if load + weight > capacity:
            used += 1
            load = 0
        load += weight
    return used <= days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries ``weights`` in order within ``days``."""
    if not weights:
        raise ValueError("ship_within_days() requires at least one weight")
    answer = 0
    low, high = max(weights), sum(weights)
    while low <= high:
        mid = low + (high - low) // 2
        if _ships_in(weights, days, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the smallest divisor whose rounded-up quotients sum to at most ``threshold``."""
    if not nums:
        raise ValueError("smallest_divisor() requires at least one value")
    low = 1
    high = max(nums)
    if len(nums) == threshold:
        return high
    answer = high
    while low <= high:
        mid = (low + high) // 2
        total = sum((value + mid - 1) // mid for value in nums)
        if total <= threshold:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _pieces(nums: Sequence[int], limit: int) -> int:
    count = 0
    current = 0
    for value in nums:
        if current + value < limit:
            current += value
        else:
            count += 1
            current = value
    return count + 1


def split_array(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest sum when ``nums`` is split into ``k`` runs."""
    if not nums:
        raise ValueError("split_array() requires at least one value")
    total = sum(nums)
    largest = max(nums)
    if k == 1:
        return total
    if k == len(nums):
        return largest
    low, high = largest, total
    answer = largest
    while low <= high:
        mid = low + (high - low) // 2
        if _pieces(nums, mid) > k:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer