"""Watching CLI 入口

遵循 P&A 架構：CLI → Driving Adapter → Application Service
支援 async 方法執行
"""

import asyncio
import inspect

import fire

from apps.watching.src.lifespan import get_injector, shutdown, startup
from apps.watching.src.adapters.driving.cli.watching_controller import (
    WatchingController,
)


def main() -> None:
    """同步入口，支援 async 方法"""
    startup()

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    try:
        controller = WatchingController(get_injector())
        result = fire.Fire(controller)

        # 如果結果是 coroutine，需要 await 它
        if inspect.iscoroutine(result):
            loop.run_until_complete(result)
    except KeyboardInterrupt:
        pass
    finally:
        shutdown()
        loop.close()


if __name__ == "__main__":
    main()
