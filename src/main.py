import sys

from PySide6.QtWidgets import QApplication

try:
    from core.animator import Animator
    from core.config_manager import ConfigManager
    from core.entropy_engine import EntropyEngine
    from core.geometry import CanvasBounds, canvas_size_for_viewport
    from core.logger import setup_logger, shutdown_logger
    from core.mood_controller import MoodController
    from core.mood_store import MoodStore
    from core.paths import APP_NAME, get_base_dir, get_log_dir, get_store_path, resolve_config_path
    from core.storage import JsonFileStore
    from ui.mood_window import MoodWindow
except ModuleNotFoundError:
    from .core.animator import Animator
    from .core.config_manager import ConfigManager
    from .core.entropy_engine import EntropyEngine
    from .core.geometry import CanvasBounds, canvas_size_for_viewport
    from .core.logger import setup_logger, shutdown_logger
    from .core.mood_controller import MoodController
    from .core.mood_store import MoodStore
    from .core.paths import APP_NAME, get_base_dir, get_log_dir, get_store_path, resolve_config_path
    from .core.storage import JsonFileStore
    from .ui.mood_window import MoodWindow


def _viewport_size(app: QApplication, config) -> tuple[int, int]:
    screen = app.primaryScreen()
    if screen is None:
        return config.canvas.default_width, config.canvas.default_height
    geometry = screen.availableGeometry()
    return geometry.width(), geometry.height()


def main() -> int:
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    config_path = resolve_config_path()
    config = ConfigManager(config_path).load()
    logger = setup_logger(get_log_dir(), debug=config.behavior.debug_mode)
    logger.info("Application starting. base_dir=%s config=%s", get_base_dir(), config_path)

    store_path = get_store_path(config.storage.store_file)
    mood_store = MoodStore(JsonFileStore(store_path))

    viewport_w, viewport_h = _viewport_size(app, config)
    canvas_w, canvas_h = canvas_size_for_viewport(viewport_w, viewport_h, config.canvas.reserved_strip_height)
    animator = Animator(
        CanvasBounds(canvas_w, canvas_h),
        entropy=EntropyEngine(),
        config=config.animation,
        background_gray=config.canvas.background_gray,
    )

    window = MoodWindow(animator, config)
    controller = MoodController(mood_store, animator, parent=window)
    controller.mood_changed.connect(window.controls.set_current_mood)
    window.controls.mood_selected.connect(controller.select)

    mood = controller.restore()
    logger.info("Restored mood=%s store=%s", mood.value, store_path)

    window.fit_to_viewport(viewport_w, viewport_h)
    window.show()
    window.canvas.start()

    def _shutdown() -> None:
        window.canvas.stop()
        logger.info("Application shutting down. frames=%d mood=%s", animator.frame_count, animator.current_mood.value)
        shutdown_logger()

    app.aboutToQuit.connect(_shutdown)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
