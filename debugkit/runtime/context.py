"""Debug context implementation owning the three debug services."""

from __future__ import annotations

import logging
from collections.abc import Callable

from debugkit.api.context import DebugContext
from debugkit.api.render import RenderAPI
from debugkit.runtime.commands import DebugCommands
from debugkit.runtime.config import DebugToolsConfig
from debugkit.runtime.console import RuntimeConsole
from debugkit.runtime.logging import setup_debug_logging
from debugkit.runtime.profiler import RuntimeProfiler
from debugkit.runtime.time import FrameClock
from debugkit.runtime.wireframe import RuntimeWireframe

_LOG = logging.getLogger("debugkit.context")


class RuntimeDebugContext(DebugContext):
    """Default debug context.

    Each instance owns its services outright; two contexts never share
    profiler samples, console logs or wireframe lines.
    """

    def __init__(
        self,
        *,
        config: DebugToolsConfig | None = None,
        render_api: RenderAPI | None = None,
        time_source: Callable[[], float] | None = None,
        timestamp_source: Callable[[], str] | None = None,
        frame_clock: FrameClock | None = None,
    ) -> None:
        self.config = config or DebugToolsConfig()
        self.render_api = render_api
        self.frame_clock = frame_clock or FrameClock(time_source=time_source)
        self._profiler = RuntimeProfiler(time_source=time_source)
        self._console = RuntimeConsole(
            timestamp_source=timestamp_source,
            mirror_to_logging=self.config.console.mirror_to_logging,
            expire_while_hidden=self.config.console.expire_while_hidden,
        )
        self._wireframe = RuntimeWireframe(auto_clear=self.config.wireframe.auto_clear)
        self._commands = DebugCommands(self._console, self._profiler, self._wireframe)
        self._initialized = False

    @property
    def profiler(self) -> RuntimeProfiler:
        return self._profiler

    @property
    def console(self) -> RuntimeConsole:
        return self._console

    @property
    def wireframe(self) -> RuntimeWireframe:
        return self._wireframe

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        if self._initialized:
            return True
        setup_debug_logging(self.config.log_level)
        self._profiler.initialize()
        self._console.initialize()
        self._wireframe.initialize()
        self._apply_config()
        self._commands.install()
        self.frame_clock.reset()
        self.frame_clock.prime()
        self._initialized = True
        _LOG.info(
            "debug_context_initialized profiler=%s wireframe=%s",
            self._profiler.enabled,
            self._wireframe.enabled,
        )
        return True

    def begin_frame(self) -> None:
        self._profiler.on_frame_start()

    def end_frame(self, delta_seconds: float | None = None) -> float:
        self._profiler.on_frame_end()
        tick = self.frame_clock.next()
        delta = tick.delta_seconds if delta_seconds is None else float(delta_seconds)
        self._profiler.update(delta)
        self._console.update(delta)
        self._wireframe.update(delta)
        return delta

    def render(self, renderer: RenderAPI | None = None) -> None:
        target = renderer if renderer is not None else self.render_api
        if target is None:
            return
        self._wireframe.render(target)
        self._profiler.render(target)
        self._console.render(target)

    def shutdown(self) -> None:
        if not self._initialized:
            return
        self._commands.uninstall()
        self._wireframe.shutdown()
        self._console.shutdown()
        self._profiler.shutdown()
        self._initialized = False
        _LOG.info("debug_context_shutdown")

    def _apply_config(self) -> None:
        profiler_cfg = self.config.profiler
        self._profiler.enabled = profiler_cfg.enabled
        self._profiler.max_history = profiler_cfg.max_history
        self._profiler.min_time = profiler_cfg.min_time_ms
        self._profiler.display_mode = profiler_cfg.display_mode

        console_cfg = self.config.console
        self._console.max_log_entries = console_cfg.max_log_entries
        self._console.log_lifetime = console_cfg.log_lifetime_s
        self._console.max_history_size = console_cfg.max_history_size
        self._console.mirror_to_logging = console_cfg.mirror_to_logging
        self._console.expire_while_hidden = console_cfg.expire_while_hidden

        wireframe_cfg = self.config.wireframe
        self._wireframe.enabled = wireframe_cfg.enabled
        self._wireframe.line_width = wireframe_cfg.line_width
        self._wireframe.auto_clear = wireframe_cfg.auto_clear
