from macforge.harness import TestCase, run_tests


def test_all_checks_pass():
    results = run_tests()

    assert len(results) == 5
    assert all(isinstance(r, TestCase) for r in results)
    assert all(r.passed for r in results)


def test_checks_are_ordered():
    names = [r.name for r in run_tests()]

    assert names == [
        "Basic Verification",
        "Wrong Tag Verification",
        "Attack Forgery Verification",
        "Random Bit Flip Verification",
        "Invalid Length Message",
    ]


def test_results_are_rebuilt():
    assert run_tests() == run_tests()
