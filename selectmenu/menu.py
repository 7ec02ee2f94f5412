"""
The paged select menu.

A menu shows one page of a string select plus previous/next buttons, waits for a single interaction,
and then either shows another page or hands the chosen option to a callback.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional, Union

import aiohttp
import disnake

from . import config, constants
from .errors import DuplicateControlId
from .helpers import (
    check_control_id,
    check_page,
    check_page_size,
    check_unique_values,
    classify_event,
    interaction_check,
)
from .loggers import log_exception
from .models import ChoiceItem, NavigationAction, NavigationEvent, PagerState
from .renderers import FreshRenderer, HintRenderer, InPlaceRenderer, Renderer
from .views import build_components

log = logging.getLogger(__name__)

SelectCallback = Callable[[NavigationEvent], Union[Awaitable[Any], Any]]

# control ids of menus that are currently waiting on the user
_active_control_ids = set()

# failures of the Discord connection or of an interaction response; these end a menu without reaching the caller
SURFACE_ERRORS = (disnake.HTTPException, disnake.ClientException, aiohttp.ClientError, OSError)


class PagedChooser:
    """
    A paginated select menu.

    Args:
        bot: The bot whose ``wait_for`` delivers component interactions
        items: The choices, as :class:`ChoiceItem` or ``{label, value, description?, emoji?}`` mappings
        control_id: Custom ID of the select menu; the navigation buttons derive theirs from it.
            Must be unique among running menus in this process, even ones shown in other channels or to other
            users. Commands that may run concurrently should include something unique (e.g. the invoking
            interaction ID) in it.
        on_select: Called once with the :class:`NavigationEvent` of the selection. May be a coroutine function.
        page_size: Choices per page (1-25)
        display_text: Message content shown above the menu
        timeout: Seconds to wait for each interaction, or None to wait forever
        owner_id: If given, only this user's interactions are considered; anyone else is told privately that
            the menu is not theirs
        fault_sink: Called with any exception that ends the menu early
        expire_on_timeout: Whether to disable the menu's controls when waiting times out
    """

    def __init__(
        self,
        bot,
        items: Iterable[Union[ChoiceItem, Mapping[str, Any]]],
        *,
        control_id: str,
        on_select: SelectCallback,
        page_size: int = constants.DEFAULT_PAGE_SIZE,
        display_text: Optional[str] = None,
        timeout: Optional[float] = config.SELECTION_TIMEOUT,
        owner_id: Optional[int] = None,
        fault_sink: Callable[[BaseException], Any] = log_exception,
        expire_on_timeout: bool = False,
    ):
        self.items = tuple(item if isinstance(item, ChoiceItem) else ChoiceItem.from_dict(item) for item in items)
        check_page_size(page_size)
        check_control_id(control_id)
        check_unique_values(self.items)

        self.bot = bot
        self.control_id = control_id
        self.on_select = on_select
        self.page_size = page_size
        self.display_text = display_text if display_text is not None else config.DEFAULT_DISPLAY_TEXT
        self.timeout = timeout
        self.owner_id = owner_id
        self.fault_sink = fault_sink
        self.expire_on_timeout = expire_on_timeout

    def state_for(self, page: int) -> PagerState:
        return PagerState(
            items=self.items,
            page_size=self.page_size,
            current_page=page,
            control_id=self.control_id,
            display_text=self.display_text,
        )

    # ==== entrypoints ====
    async def present_page(self, renderer: Renderer, page: int = 0) -> Optional[NavigationEvent]:
        """
        Shows *page* of the menu through *renderer* and runs the menu until it ends.

        Returns the selection event, or None if the menu ended without a selection (no options, an unrecognized
        interaction, a timeout or a Discord error). Errors from the first render and from ``on_select`` propagate;
        any later failure is passed to the fault sink instead.

        :raises InvalidPage: if the page is out of range
        :raises DuplicateControlId: if another menu with this control ID is running
        """
        state = self.state_for(page)
        if state.page_count == 0:
            await renderer.notify(constants.MSG_NO_OPTIONS)
            return None
        check_page(page, state.page_count)

        if self.control_id in _active_control_ids:
            raise DuplicateControlId(self.control_id)
        _active_control_ids.add(self.control_id)
        try:
            message = await renderer.render(state.display_text, build_components(state))
            return await self._run(state, message)
        finally:
            _active_control_ids.discard(self.control_id)

    def start(self, renderer: Renderer, page: int = 0) -> asyncio.Task:
        """Runs :meth:`present_page` in the background. Exceptions it raises are passed to the fault sink."""
        task = asyncio.create_task(self.present_page(renderer, page))
        task.add_done_callback(self._on_task_done)
        return task

    # ==== state machine ====
    async def _run(self, state: PagerState, message: disnake.Message) -> Optional[NavigationEvent]:
        while True:
            try:
                interaction = await self.bot.wait_for(
                    "message_interaction", check=interaction_check(message.id), timeout=self.timeout
                )
            except asyncio.TimeoutError as e:
                self.fault_sink(e)
                if self.expire_on_timeout:
                    await self._expire(state, message)
                return None
            except SURFACE_ERRORS as e:
                self.fault_sink(e)
                return None

            if self.owner_id is not None and interaction.author.id != self.owner_id:
                try:
                    await interaction.response.send_message(constants.ERROR_UNAUTHORIZED_USER, ephemeral=True)
                except SURFACE_ERRORS as e:
                    log.debug(f"Exception when turning away user {interaction.author.id} from {state.control_id!r}: {e}")
                continue

            event = classify_event(interaction, state.control_id)
            match event.action:
                case NavigationAction.SELECTED:
                    await self._invoke_callback(event)
                    return event
                case NavigationAction.PREV if not state.is_first_page:
                    state = state.with_page(state.current_page - 1)
                    renderer = InPlaceRenderer(interaction)
                case NavigationAction.NEXT if not state.is_last_page:
                    state = state.with_page(state.current_page + 1)
                    renderer = InPlaceRenderer(interaction)
                case NavigationAction.PREV | NavigationAction.NEXT | NavigationAction.NOOP:
                    # the page indicator, or a stale navigation button pressed at the edge of the menu
                    renderer = HintRenderer(interaction)
                case _:
                    log.debug(f"Unrecognized custom_id {event.custom_id!r} on menu {state.control_id!r}, stopping")
                    return None

            log.debug(f"Menu {state.control_id!r}: {event.action.value} -> page {state.current_page}")
            try:
                message = await renderer.render(state.display_text, build_components(state))
            except SURFACE_ERRORS as e:
                self.fault_sink(e)
                return None

    async def _invoke_callback(self, event: NavigationEvent):
        result = self.on_select(event)
        if inspect.isawaitable(result):
            await result

    async def _expire(self, state: PagerState, message: disnake.Message):
        try:
            await message.edit(components=build_components(state, expired=True))
        except SURFACE_ERRORS as e:
            # Expected - message might already be deleted
            log.debug(f"Exception when expiring menu {state.control_id!r}: {e}")

    def _on_task_done(self, task: asyncio.Task):
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.fault_sink(exc)


async def send_paged_menu(
    bot,
    destination,
    items: Iterable[Union[ChoiceItem, Mapping[str, Any]]],
    *,
    control_id: str,
    on_select: SelectCallback,
    page: int = 0,
    **kwargs,
) -> Optional[NavigationEvent]:
    """
    Sends a paged select menu to *destination* (an interaction or a messageable) and runs it until it ends.
    Extra keyword arguments are passed to :class:`PagedChooser`.
    """
    chooser = PagedChooser(bot, items, control_id=control_id, on_select=on_select, **kwargs)
    return await chooser.present_page(FreshRenderer(destination), page)
