import random
import re

MONEY_PATTERN = re.compile(r"\$(\d+\.?\d*)")


def parse_money(text: str) -> float:
    """
        从 'Item total: $39.98' 提取 39.98
        匹配不到金额时返回 0.0
        """
    match = MONEY_PATTERN.search(text or "")
    return float(match.group(1)) if match else 0.0


def to_kebab_case(name: str) -> str:
    """'Sauce Labs Backpack' -> 'sauce-labs-backpack'，用于拼接 data-test 属性"""
    return re.sub(r"\s+", "-", name.lower())


def random_unique_indices(total: int, count: int, rng=random) -> list[int]:
    """在 [0, total) 中随机抽取 count 个不重复下标，按抽取顺序返回
    重复抽到的下标直接丢弃，继续抽取
    """
    if count > total:
        raise ValueError(f"Cannot pick {count} unique indices from {total}")
    indices: list[int] = []
    while len(indices) < count:
        index = rng.randrange(total)
        if index not in indices:
            indices.append(index)
    return indices
