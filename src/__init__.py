from src.min_pq.min_pq import MinPQ
from src.min_pq.topk import get_topk, heapsort
