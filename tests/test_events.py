import unittest

from core.events import (
    EventId, SimulationEventDispatcher, UnknownChannelError, EventChannelError
)


class TestSimulationEventDispatcher(unittest.TestCase):
    def setUp(self):
        self.dispatcher = SimulationEventDispatcher()
        self.dispatcher.register_channel(EventId.ON_MOVE)
        self.calls = []

    def test_dispatch_in_registration_order(self):
        self.dispatcher.add_listener(EventId.ON_MOVE, lambda p: self.calls.append(("first", p)))
        self.dispatcher.add_listener(EventId.ON_MOVE, lambda p: self.calls.append(("second", p)))
        self.dispatcher.dispatch(EventId.ON_MOVE, 7)
        self.assertEqual(self.calls, [("first", 7), ("second", 7)])

    def test_dispatch_is_synchronous(self):
        """Listeners have run by the time dispatch returns."""
        self.dispatcher.add_listener(EventId.ON_MOVE, self.calls.append)
        self.dispatcher.dispatch(EventId.ON_MOVE, "payload")
        self.assertEqual(self.calls, ["payload"])

    def test_register_is_idempotent(self):
        self.dispatcher.add_listener(EventId.ON_MOVE, self.calls.append)
        self.dispatcher.register_channel(EventId.ON_MOVE)
        self.assertEqual(len(self.dispatcher.listeners(EventId.ON_MOVE)), 1)

    def test_channel_without_listeners(self):
        self.dispatcher.dispatch(EventId.ON_MOVE, None)
        self.assertTrue(self.dispatcher.has_channel(EventId.ON_MOVE))
        self.assertFalse(self.dispatcher.has_channel(EventId.ON_OUTLET_MOVE))

    def test_remove_listener(self):
        self.dispatcher.add_listener(EventId.ON_MOVE, self.calls.append)
        self.dispatcher.remove_listener(EventId.ON_MOVE, self.calls.append)
        self.dispatcher.dispatch(EventId.ON_MOVE, 1)
        self.assertEqual(self.calls, [])
        # Removing twice is harmless
        self.dispatcher.remove_listener(EventId.ON_MOVE, self.calls.append)

    def test_listener_removing_itself_does_not_skip_others(self):
        def once(payload):
            self.calls.append("once")
            self.dispatcher.remove_listener(EventId.ON_MOVE, once)

        self.dispatcher.add_listener(EventId.ON_MOVE, once)
        self.dispatcher.add_listener(EventId.ON_MOVE, lambda p: self.calls.append("always"))
        self.dispatcher.dispatch(EventId.ON_MOVE)
        self.dispatcher.dispatch(EventId.ON_MOVE)
        self.assertEqual(self.calls, ["once", "always", "always"])

    def test_unknown_channel(self):
        with self.assertRaises(UnknownChannelError) as ctx:
            self.dispatcher.dispatch(EventId.ON_OUTLET_MOVE, None)
        self.assertEqual(ctx.exception.event_id, EventId.ON_OUTLET_MOVE)

        with self.assertRaises(EventChannelError):
            self.dispatcher.add_listener("onSomethingElse", self.calls.append)

    def test_dispatchers_are_independent(self):
        other = SimulationEventDispatcher()
        self.assertFalse(other.has_channel(EventId.ON_MOVE))


if __name__ == "__main__":
    unittest.main()
