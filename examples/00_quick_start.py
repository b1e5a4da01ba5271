"""
Quick Start Example - Menu, Form and Select views

Run it in a terminal and move around with Tab/Shift-Tab and the arrow keys.
Press the highlighted letter of a menu item to run it, Q to quit.

Set TUI_COMPOSE_LOG_FILE=~/tui.log to see focus changes in the log.
"""
import asyncio

from tui_compose import (
    App,
    FormFieldDescription,
    FormView,
    InputView,
    MenuItem,
    SelectView,
    SelectViewItem,
    Tab,
    View,
)


class HomeView(FormView):
    """Landing view: a small profile form and links to the other demos."""

    def __init__(self, tab: Tab):
        super().__init__(
            tab,
            "Home",
            [
                FormFieldDescription(label="Name", default="Ada"),
                FormFieldDescription(label="Age", default="36", type="integer"),
                FormFieldDescription(label="PIN", type="password"),
            ],
            [
                MenuItem(key="S", label="Save", help="Save the profile", execute=self.save),
                MenuItem(key="C", label="Colors", help="Pick a color", execute=self.pick_color),
                MenuItem(key="E", label="Echo", help="Type lines with history", execute=self.echo),
            ],
        )

    async def save(self):
        values = self.values
        self._tab.set_info(f"Saved {values['Name']} ({values['Age']})")

    async def pick_color(self):
        self._tab.push_view(ColorView(self._tab))

    async def echo(self):
        self._tab.push_view(EchoView(self._tab))


class ColorView(SelectView):
    def __init__(self, tab: Tab):
        colors = ["Red", "Orange", "Yellow", "Green", "Blue", "Indigo", "Violet"]
        items = [SelectViewItem(label=color, execute=self._chooser(tab, color)) for color in colors]
        items.append(SelectViewItem(label="Ultraviolet"))
        super().__init__(tab, "Colors", items)

    @staticmethod
    def _chooser(tab: Tab, color: str):
        async def choose():
            tab.pop_view()
            tab.set_info(f"You chose {color}")
        return choose


class EchoView(InputView):
    def __init__(self, tab: Tab):
        super().__init__(
            tab,
            "Echo",
            self.on_line,
            instructions="Anything you type is echoed in the status bar.",
        )

    async def on_line(self, line: str):
        self._tab.set_info(f"You said: {line}")


def home(tab: Tab) -> View:
    return HomeView(tab)


async def main():
    app = App("Quick Start", home)
    await app.run()


if __name__ == "__main__":
    asyncio.run(main())
