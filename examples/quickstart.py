"""ewstats quickstart: a request rate that forgets old traffic."""

import time

from ewstats import AverageAccumulator, RateAccumulator, RateConfig

# 1. A rate with a one-minute half-life, starting now
start = int(time.time() * 1000)
requests = RateAccumulator.from_config(RateConfig(origin_time_millis=start, half_life_millis=60_000))

# 2. Record a burst of requests, one per 100ms
for i in range(1, 51):
    requests.record(1.0, start + 100 * i)

# 3. Query the rate now and as it fades while traffic is quiet
for seconds in (5, 60, 300, 3600):
    per_second = requests.query(start + seconds * 1000) * 1000
    print(f"after {seconds:>5}s: {per_second:.3f} req/s")

# 4. A decayed average of response times, no seed value needed
latency = AverageAccumulator(alpha=0.1)
for ms in (120.0, 80.0, 95.0, 400.0, 110.0):
    latency.record(ms)
print(f"\naverage latency: {latency.query():.1f}ms over {latency.count} responses")
