"""Call-tracking mocks and scripted spies.

Types:
- CallRecord: Immutable snapshot of one recorded call
- MockTracker: Ordered call log with queries and assertions
- MockReturn: Saturating FIFO of scripted return values
- Spy: MockTracker plus per-method MockReturn[str] scripts
"""

from testkit.mocks.call_record import CallRecord
from testkit.mocks.returns import MockReturn
from testkit.mocks.spy import Spy
from testkit.mocks.tracker import MockTracker

__all__ = ["CallRecord", "MockReturn", "MockTracker", "Spy"]
