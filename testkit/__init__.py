"""testkit: in-process test support.

Call-tracking mocks (MockTracker), scripted spies (Spy, MockReturn),
assertion predicates (testkit.assertions) and fixtures (TestContext,
TestData, TestSuite, swap).

Usage:
    from testkit import MockTracker, Spy

    def test_lookup():
        spy = Spy()
        spy.returns("fetch").add_return("cached")
        service = Service(fetch=spy.method("fetch"))
        assert service.lookup("k") == "cached"
        spy.assert_called_with("fetch", ["k"])
"""

from testkit.errors import AssertionFailure
from testkit.fixtures import Swap, TestContext, TestData, TestResult, TestSuite, swap
from testkit.mocks import CallRecord, MockReturn, MockTracker, Spy

__all__ = [
    "AssertionFailure",
    "CallRecord",
    "MockReturn",
    "MockTracker",
    "Spy",
    "Swap",
    "TestContext",
    "TestData",
    "TestResult",
    "TestSuite",
    "swap",
]
