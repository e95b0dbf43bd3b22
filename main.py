import logging

from src import MinPQ, get_topk

logging.basicConfig(level=logging.DEBUG)

# Bigger numbers have the highest priority
print("Creating max-first queue...")
pq = MinPQ(lambda a, b: a > b)
pq.extend([1, 2, 100, 3])
print(f"Queue size: {len(pq)}")
print(f"Raw storage: {pq}")
print(f"Highest priority: {pq.remove_min()}")

# Shorter strings have the highest priority
words = MinPQ.from_sequence(
    ["Hi", "Hello", "Goodbye"],
    lambda s1, s2: len(s1) < len(s2)
)
print(f"Sorted words: {words.to_sorted_list()}")
print(f"Top 2 words: {get_topk(words, 2)}")
print(f"Is empty: {words.is_empty()}")
