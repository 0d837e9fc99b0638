"""Wire keyed window/document listeners and storage through a BrowserKit container."""

from __future__ import annotations

import asyncio

from browserkit import BrowserKit, BrowserKitConfig, EventEmitter
from browserkit.urls import decode_params, encode_params


class Layout:
    def __init__(self, kit: BrowserKit) -> None:
        self.kit = kit
        self.width = 0

    def mount(self) -> None:
        self.kit.listeners.register(
            self.kit.window, "resize", self.handle_resize, "window_resize_layout_handle_resize"
        )

    def unmount(self) -> None:
        self.kit.listeners.unregister(
            self.kit.window, "resize", "window_resize_layout_handle_resize"
        )

    def handle_resize(self, event) -> None:
        self.width = event.detail["width"]
        print(f"layout width -> {self.width}")


async def main() -> None:
    kit = BrowserKit(BrowserKitConfig.from_env())
    await kit.init_backend()

    layout = Layout(kit)
    layout.mount()
    layout.mount()  # remounting replaces the listener instead of stacking it
    kit.window.dispatchEvent("resize", detail={"width": 1280})

    socket = EventEmitter("socket")
    kit.listeners.register(socket, "message", print, "socket_message_main_print")
    socket.emit("message", "hello from the socket")

    await kit.local_storage.set("last_query", decode_params("/search?q=%E4%B9%A6&page=2"))
    print(encode_params(await kit.local_storage.get("last_query")))

    layout.unmount()
    kit.window.dispatchEvent("resize", detail={"width": 640})
    await kit.close()


if __name__ == "__main__":
    asyncio.run(main())
