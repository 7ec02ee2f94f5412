"""
Renderers put a page of the menu on screen and return the message that shows it.

The caller picks how the first page is shown (usually a :class:`FreshRenderer`); the menu itself
switches to :class:`InPlaceRenderer` or :class:`HintRenderer` as the user navigates.
"""

import abc
from typing import List

import disnake

from . import config, constants


class Renderer(abc.ABC):
    @abc.abstractmethod
    async def render(self, content: str, components: List[disnake.ui.ActionRow]) -> disnake.Message:
        """Show *content* and *components*, returning the message the menu now lives on."""
        raise NotImplementedError

    @abc.abstractmethod
    async def notify(self, content: str):
        """Show a short notice that is not part of the menu (e.g. when there is nothing to choose from)."""
        raise NotImplementedError


class FreshRenderer(Renderer):
    """
    Shows the menu in reply to *destination*.

    If the destination is an interaction that has not been responded to yet, the menu is sent as its response.
    If it has already been responded to (e.g. deferred), the original response is edited.
    Any other destination is treated as a :class:`disnake.abc.Messageable` and the menu is sent to it.
    """

    def __init__(self, destination):
        self.destination = destination

    async def render(self, content, components):
        if isinstance(self.destination, disnake.Interaction):
            if self.destination.response.is_done():
                return await self.destination.edit_original_response(content=content, components=components)
            await self.destination.response.send_message(content=content, components=components)
            return await self.destination.original_response()
        return await self.destination.send(content=content, components=components)

    async def notify(self, content):
        if isinstance(self.destination, disnake.Interaction):
            await self.destination.send(content, ephemeral=True)
        else:
            await self.destination.send(content, delete_after=config.HINT_DELETE_AFTER)


class InPlaceRenderer(Renderer):
    """Updates the message a component interaction came from."""

    def __init__(self, interaction: disnake.MessageInteraction):
        self.interaction = interaction

    async def render(self, content, components):
        if self.interaction.response.is_done():
            return await self.interaction.edit_original_response(content=content, components=components)
        await self.interaction.response.edit_message(content=content, components=components)
        return self.interaction.message

    async def notify(self, content):
        await self.interaction.send(content, ephemeral=True)


class HintRenderer(InPlaceRenderer):
    """Leaves the menu untouched and answers the interaction with a private, short-lived hint."""

    def __init__(self, interaction: disnake.MessageInteraction, hint: str = constants.MSG_NOTHING_HERE):
        super().__init__(interaction)
        self.hint = hint

    async def render(self, content, components):
        await self.interaction.response.send_message(self.hint, ephemeral=True, delete_after=config.HINT_DELETE_AFTER)
        return self.interaction.message
