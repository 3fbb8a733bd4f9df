from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QThread, QTimer, Signal, Slot
from PySide6.QtGui import QAction, QKeyEvent, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QProgressBar,
    QStackedWidget,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from windsurf_recent.entities.RecentProject import RecentProject
from windsurf_recent.exceptions import LaunchError
from windsurf_recent.use_cases.projects.list_recent_projects import (
    ListRecentProjectsUseCase,
)
from windsurf_recent.use_cases.projects.open_project import OpenProjectUseCase

from .state import ProjectListState, matches_query

EMPTY_TITLE = "No recent projects"
EMPTY_DESCRIPTION = "Projects you open in Windsurf will appear here."
TOAST_TIMEOUT_MS = 3000
CLOSE_AFTER_SUCCESS_MS = 1200


class _LoadWorker(QObject):
    finished = Signal(list)

    def __init__(self, use_case: ListRecentProjectsUseCase) -> None:
        super().__init__()
        self._use_case = use_case

    @Slot()
    def run(self) -> None:
        # The use case never raises; an unreadable file comes back as []
        self.finished.emit(self._use_case.execute())


class _LaunchWorker(QObject):
    succeeded = Signal(str)
    failed = Signal(str)
    finished = Signal()

    def __init__(self, use_case: OpenProjectUseCase, path: str) -> None:
        super().__init__()
        self._use_case = use_case
        self._path = path

    @Slot()
    def run(self) -> None:
        try:
            self._use_case.execute(self._path)
            self.succeeded.emit(self._path)
        except LaunchError as e:
            self.failed.emit(str(e))
        finally:
            self.finished.emit()


class RecentProjectsWindow(QMainWindow):
    def __init__(
        self,
        list_use_case: ListRecentProjectsUseCase,
        open_use_case: OpenProjectUseCase,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Windsurf Recent Projects")
        self.setMinimumSize(640, 420)

        self._list_use_case = list_use_case
        self._open_use_case = open_use_case
        self._state = ProjectListState.loading()
        self._load_started = False
        self._load_thread: Optional[QThread] = None
        self._launch_thread: Optional[QThread] = None

        self._build_actions()
        self._build_layout()
        self._render()

    @property
    def state(self) -> ProjectListState:
        return self._state

    # UI building
    def _build_actions(self) -> None:
        self.action_open = QAction("Open Project", self)
        self.action_open.setShortcuts(
            [QKeySequence("Return"), QKeySequence("Enter")]
        )
        self.action_open.triggered.connect(self.open_selected)

        # Ctrl maps to Cmd on macOS
        self.action_copy = QAction("Copy Path", self)
        self.action_copy.setShortcut(QKeySequence("Ctrl+C"))
        self.action_copy.triggered.connect(self.copy_selected)

    def _build_layout(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.search_edit = QLineEdit(central)
        self.search_edit.setObjectName("searchBar")
        self.search_edit.setPlaceholderText("Search recent projects…")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self._on_filter_changed)
        self.search_edit.installEventFilter(self)

        self.progress = QProgressBar(central)
        self.progress.setRange(0, 0)
        self.progress.setTextVisible(False)
        self.progress.setMaximumHeight(4)

        self.stack = QStackedWidget(central)

        self.project_list = QListWidget(self.stack)
        self.project_list.setObjectName("projectList")
        self.project_list.setContextMenuPolicy(
            Qt.ContextMenuPolicy.ActionsContextMenu
        )
        self.project_list.addAction(self.action_open)
        self.project_list.addAction(self.action_copy)
        self.project_list.itemActivated.connect(self._on_item_activated)

        self.empty_view = QWidget(self.stack)
        empty_layout = QVBoxLayout(self.empty_view)
        empty_layout.addStretch(1)
        empty_icon = QLabel(self.empty_view)
        empty_icon.setPixmap(
            self.style()
            .standardIcon(QStyle.StandardPixmap.SP_MessageBoxCritical)
            .pixmap(48, 48)
        )
        empty_icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_title = QLabel(EMPTY_TITLE, self.empty_view)
        self.empty_title.setObjectName("emptyTitle")
        self.empty_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_description = QLabel(EMPTY_DESCRIPTION, self.empty_view)
        self.empty_description.setObjectName("emptyDescription")
        self.empty_description.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_layout.addWidget(empty_icon)
        empty_layout.addWidget(self.empty_title)
        empty_layout.addWidget(self.empty_description)
        empty_layout.addStretch(1)

        self.stack.addWidget(self.project_list)
        self.stack.addWidget(self.empty_view)

        layout.addWidget(self.search_edit)
        layout.addWidget(self.progress)
        layout.addWidget(self.stack)

        self.addAction(self.action_open)
        self.addAction(self.action_copy)
        self.statusBar()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # type: ignore[override]
        # The search box claims Ctrl+C even with nothing selected; hand it to Copy Path then
        if (
            obj is getattr(self, "search_edit", None)
            and event.type() == QEvent.Type.ShortcutOverride
            and isinstance(event, QKeyEvent)
            and event.matches(QKeySequence.StandardKey.Copy)
            and not self.search_edit.hasSelectedText()
        ):
            event.ignore()
            return True
        return super().eventFilter(obj, event)

    # Loading
    def start_loading(self) -> None:
        """Load recent projects once, on a worker thread."""
        if self._load_started:
            return
        self._load_started = True

        self._load_thread = QThread(self)
        self._load_worker = _LoadWorker(self._list_use_case)
        self._load_worker.moveToThread(self._load_thread)

        self._load_thread.started.connect(self._load_worker.run)
        self._load_worker.finished.connect(self._on_projects_loaded)
        self._load_worker.finished.connect(self._load_thread.quit)
        self._load_worker.finished.connect(self._load_worker.deleteLater)
        self._load_thread.finished.connect(self._load_thread.deleteLater)

        self._load_thread.start()

    @Slot(list)
    def _on_projects_loaded(self, projects: list) -> None:
        self._state = self._state.ready(projects)
        self._render()

    # Rendering
    def _render(self) -> None:
        self.progress.setVisible(self._state.is_loading)
        self.project_list.clear()
        if self._state.is_empty:
            self.stack.setCurrentWidget(self.empty_view)
            self.search_edit.setEnabled(False)
            return

        self.stack.setCurrentWidget(self.project_list)
        self.search_edit.setEnabled(not self._state.is_loading)
        folder_icon = self.style().standardIcon(QStyle.StandardPixmap.SP_DirIcon)
        for project in self._state.projects:
            item = QListWidgetItem(folder_icon, f"{project.label}\n{project.path}")
            item.setToolTip(project.path)
            item.setData(Qt.ItemDataRole.UserRole, project)
            self.project_list.addItem(item)
        if self.project_list.count():
            self.project_list.setCurrentRow(0)
        self._on_filter_changed(self.search_edit.text())

    @Slot(str)
    def _on_filter_changed(self, text: str) -> None:
        first_visible: Optional[QListWidgetItem] = None
        for row in range(self.project_list.count()):
            item = self.project_list.item(row)
            project = item.data(Qt.ItemDataRole.UserRole)
            visible = matches_query(project, text)
            item.setHidden(not visible)
            if visible and first_visible is None:
                first_visible = item
        current = self.project_list.currentItem()
        if current is None or current.isHidden():
            if first_visible is None:
                self.project_list.setCurrentRow(-1)
            else:
                self.project_list.setCurrentItem(first_visible)

    def visible_projects(self) -> list[RecentProject]:
        return [
            self.project_list.item(row).data(Qt.ItemDataRole.UserRole)
            for row in range(self.project_list.count())
            if not self.project_list.item(row).isHidden()
        ]

    def selected_project(self) -> Optional[RecentProject]:
        item = self.project_list.currentItem()
        if item is None or item.isHidden():
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def show_toast(self, message: str) -> None:
        self.statusBar().showMessage(message, TOAST_TIMEOUT_MS)

    # Actions
    @Slot(QListWidgetItem)
    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.project_list.setCurrentItem(item)
        self.open_selected()

    @Slot()
    def open_selected(self) -> None:
        project = self.selected_project()
        if project is None:
            return
        self.launch(project.path)

    @Slot()
    def copy_selected(self) -> None:
        project = self.selected_project()
        if project is None:
            return
        QApplication.clipboard().setText(project.path)
        self.show_toast(f"Copied path: {project.path}")

    def launch(self, path: str) -> None:
        """Open ``path`` in Windsurf on a worker thread."""
        if self._launch_thread is not None:
            return

        self._launch_thread = QThread(self)
        self._launch_worker = _LaunchWorker(self._open_use_case, path)
        self._launch_worker.moveToThread(self._launch_thread)

        self._launch_thread.started.connect(self._launch_worker.run)
        self._launch_worker.succeeded.connect(self._on_launch_succeeded)
        self._launch_worker.failed.connect(self._on_launch_failed)
        self._launch_worker.finished.connect(self._launch_thread.quit)
        self._launch_worker.finished.connect(self._launch_worker.deleteLater)
        self._launch_thread.finished.connect(self._on_launch_thread_finished)

        self._launch_thread.start()

    @Slot()
    def _on_launch_thread_finished(self) -> None:
        if self._launch_thread is not None:
            self._launch_thread.deleteLater()
        self._launch_thread = None

    @Slot(str)
    def _on_launch_succeeded(self, path: str) -> None:
        self.show_toast(f"Opened project: {path}")
        QTimer.singleShot(CLOSE_AFTER_SUCCESS_MS, self.close)

    @Slot(str)
    def _on_launch_failed(self, message: str) -> None:
        self.show_toast(f"Could not open project: {message}")
