"""
Paged List Example

A read-only list view with Page Down/Page Up menu items that only appear
when there is somewhere to go, plus a text view paged the same way.
"""
import asyncio

from tui_compose import App, List, ListColumn, Menu, MenuItem, Tab, Text, View

PLANETS = [
    ("Mercury", 0.39, 0),
    ("Venus", 0.72, 0),
    ("Earth", 1.00, 1),
    ("Mars", 1.52, 2),
    ("Jupiter", 5.20, 95),
    ("Saturn", 9.58, 146),
    ("Uranus", 19.2, 28),
    ("Neptune", 30.1, 16),
]

ABOUT = (
    "The planets are listed in order of their mean distance from the sun, "
    "measured in astronomical units. Moon counts change as new moons are found. "
) * 20


class PlanetView(View):
    def __init__(self, tab: Tab):
        super().__init__("Planets")
        self._tab = tab
        self._menu = Menu(tab, [
            MenuItem(key="A", label="About", help="Read about this list", execute=self.about),
        ])
        self._list = List(
            tab,
            [
                ListColumn(heading="Planet", width=10, value=lambda planet, index: planet[0]),
                ListColumn(heading="AU", width=6, value=lambda planet, index: f"{planet[1]:.2f}"),
                ListColumn(heading="Moons", width=5, value=lambda planet, index: str(planet[2])),
            ],
            PLANETS,
            menu=self._menu,
        )

    async def about(self):
        self._tab.push_view(AboutView(self._tab))

    async def handle(self, key):
        if await self._list.handle(key):
            return True
        return await self._menu.handle(key)

    def render(self, inactive=False):
        self._list.render(True)
        self._menu.render(inactive)


class AboutView(View):
    def __init__(self, tab: Tab):
        super().__init__("About")
        self._menu = Menu(tab)
        self._text = Text(tab, ABOUT)

    async def handle(self, key):
        if await self._text.handle(key):
            return True
        return await self._menu.handle(key)

    def render(self, inactive=False):
        self._text.render(True)
        self._menu.render(inactive)


async def main():
    await App("Paged List", PlanetView).run()


if __name__ == "__main__":
    asyncio.run(main())
