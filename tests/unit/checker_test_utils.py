"""Helpers for verifying messages emitted through a mocked linter."""

import unittest.mock


class CheckerTestCase:
    """Mixin for Checker tests."""

    def assertAddsMessage(self, checker, msg_id, node=None, args=None):
        """Verify that checker.add_message was called."""
        # We assert on the linter mock
        calls = checker.linter.add_message.call_args_list
        found: bool = False

        for call in calls:
            c_args, c_kwargs = call

            # 1. Check MSG ID (Pos 0)
            if not (len(c_args) > 0 and c_args[0] == msg_id):
                continue

            # 2. Check Node (Pos 2 or Kwarg 'node')
            actual_node = None
            if len(c_args) > 2:
                actual_node = c_args[2]
            elif "node" in c_kwargs:
                actual_node = c_kwargs["node"]
            if node is not None and actual_node is not node:
                continue

            # 3. Check Args (Pos 3 or Kwarg 'args')
            actual_args = None
            if len(c_args) > 3:
                actual_args = c_args[3]
            elif "args" in c_kwargs:
                actual_args = c_kwargs["args"]
            if args is not None and args != unittest.mock.ANY:
                if actual_args != args:
                    continue

            found = True
            break

        if not found:
            raise AssertionError(f"Message {msg_id} not found in calls: {calls}")

    def assertNoMessages(self, checker):
        calls = checker.linter.add_message.call_args_list
        if calls:
            raise AssertionError(f"Expected no messages, but found: {calls}")
        checker.linter.add_message.assert_not_called()

    def emitted_args(self, checker, msg_id):
        """All args tuples emitted for msg_id, in emission order."""
        out = []
        for c_args, c_kwargs in checker.linter.add_message.call_args_list:
            if not c_args or c_args[0] != msg_id:
                continue
            out.append(c_args[3] if len(c_args) > 3 else c_kwargs.get("args"))
        return out
