from concurrent.futures import ThreadPoolExecutor

from slackkit.idgen import SafeID


def test_sequence_starts_at_given_id():
    gen = SafeID(5)
    assert [gen.next() for _ in range(3)] == [5, 6, 7]


def test_default_start_is_zero():
    assert SafeID().next() == 0


def test_concurrent_ids_are_unique():
    gen = SafeID(1)
    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(gen.next) for _ in range(8 * 200)]
        results = [future.result() for future in futures]
    assert sorted(results) == list(range(1, 1 + 8 * 200))
    assert gen.next() == 1 + 8 * 200