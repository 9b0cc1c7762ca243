"""Unit tests for DialogSet and DialogContext stack operations."""

import pytest

from coursebot.core.constants import DialogTurnStatus
from coursebot.core.errors import DialogStackError
from coursebot.core.types import DialogTurnResult
from coursebot.dialogs.context import DialogSet
from coursebot.dialogs.waterfall import WaterfallDialog


async def wait_step(step):
    return DialogTurnResult.waiting()


async def end_with_options(step):
    return await step.end_dialog(step.options)


def make_dialogs() -> DialogSet:
    dialogs = DialogSet()
    dialogs.add(WaterfallDialog("waiter", [wait_step, end_with_options]))
    dialogs.add(WaterfallDialog("ender", [end_with_options]))
    return dialogs


class TestDialogSet:
    def test_find_returns_registered_dialog(self):
        dialogs = make_dialogs()

        assert dialogs.find("waiter").id == "waiter"
        assert dialogs.find("missing") is None
        assert "ender" in dialogs

    def test_add_rejects_duplicate_id(self):
        dialogs = make_dialogs()

        with pytest.raises(DialogStackError, match="Duplicate"):
            dialogs.add(WaterfallDialog("waiter"))


class TestEndDialog:
    @pytest.mark.asyncio
    async def test_end_dialog_on_empty_stack_is_noop(self, make_driver):
        """
        GIVEN an empty stack
        WHEN end_dialog is called
        THEN the result is EMPTY and depth stays 0
        """
        # Arrange
        driver = make_driver(make_dialogs())

        # Act
        result = await driver.context().end_dialog("ignored")

        # Assert
        assert result.status == DialogTurnStatus.EMPTY
        assert driver.state.depth == 0

    @pytest.mark.asyncio
    async def test_end_of_root_dialog_completes_turn(self, make_driver):
        driver = make_driver(make_dialogs())

        result = await driver.begin("ender", {"answer": 42})

        assert result.status == DialogTurnStatus.COMPLETE
        assert result.result == {"answer": 42}
        assert driver.state.depth == 0

    @pytest.mark.asyncio
    async def test_repeated_end_never_goes_negative(self, make_driver):
        driver = make_driver(make_dialogs())
        await driver.begin("waiter")

        for _ in range(3):
            await driver.context().end_dialog()

        assert driver.state.depth == 0


class TestContinueDialog:
    @pytest.mark.asyncio
    async def test_continue_with_empty_stack_returns_empty(self, make_driver):
        driver = make_driver(make_dialogs())

        result = await driver.say("hello")

        assert result.status == DialogTurnStatus.EMPTY

    @pytest.mark.asyncio
    async def test_continue_routes_to_active_dialog(self, make_driver):
        driver = make_driver(make_dialogs())
        await driver.begin("waiter", {"k": "v"})

        result = await driver.say("anything")

        assert result.status == DialogTurnStatus.COMPLETE
        assert result.result == {"k": "v"}

    @pytest.mark.asyncio
    async def test_unknown_dialog_raises(self, make_driver):
        driver = make_driver(make_dialogs())

        with pytest.raises(DialogStackError, match="not found"):
            await driver.begin("missing")


class TestOptionsIsolation:
    @pytest.mark.asyncio
    async def test_begin_copies_options(self, make_driver):
        """The callee gets its own copy of the options bag."""
        driver = make_driver(make_dialogs())
        options = {"type": {"module_type": "Algebra"}}

        await driver.begin("waiter", options)
        driver.state.dialog_stack[-1].options["type"]["module_type"] = "Changed"

        assert options == {"type": {"module_type": "Algebra"}}


class TestReplaceAndCancel:
    @pytest.mark.asyncio
    async def test_replace_dialog_swaps_top_frame(self, make_driver):
        driver = make_driver(make_dialogs())
        await driver.begin("waiter", {"round": 1})

        await driver.context().replace_dialog("waiter", {"round": 2})

        assert driver.stack_ids == ["waiter"]
        assert driver.state.dialog_stack[0].options == {"round": 2}
        assert driver.state.dialog_stack[0].step_index == 0

    @pytest.mark.asyncio
    async def test_cancel_all_dialogs_clears_stack(self, make_driver):
        driver = make_driver(make_dialogs())
        await driver.begin("waiter")
        await driver.begin("waiter")

        result = await driver.context().cancel_all_dialogs()

        assert result.status == DialogTurnStatus.CANCELLED
        assert driver.state.depth == 0

    @pytest.mark.asyncio
    async def test_cancel_all_dialogs_on_empty_stack(self, make_driver):
        driver = make_driver(make_dialogs())

        result = await driver.context().cancel_all_dialogs()

        assert result.status == DialogTurnStatus.CANCELLED
        assert driver.state.depth == 0
