from __future__ import annotations

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QPen, QBrush, QColor, QPainter
from PySide6.QtWidgets import (
    QGraphicsView, QGraphicsScene, QGraphicsEllipseItem, QGraphicsLineItem, QWidget
)

from zeemanmachine.app.state import DisplayOptions, Store
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.utils import ViewTransform

PIXELS_PER_UNIT = 60.0
SCENE_EXTENT = 5.0  # model units visible around the disc centre
MARKER_RADIUS = 0.08


class MachineView(QGraphicsView):
    """
    2D drawing of the machine: disc, spoke, both elastics, anchor and pointer.

    Dragging with the left mouse button moves the pointer. The scene is laid
    out in pixels with the model origin at scene (0, 0); `view_transform`
    converts between the two.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.view_transform = ViewTransform(scale=PIXELS_PER_UNIT)
        self._dragging = False

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        extent = SCENE_EXTENT * PIXELS_PER_UNIT
        self._scene.setSceneRect(-extent, -extent, 2 * extent, 2 * extent)

        self._grid_items = self._build_grid()

        r = PIXELS_PER_UNIT
        self._disc = self._scene.addEllipse(
            QRectF(-r, -r, 2 * r, 2 * r), QPen(QColor("black"), 1.5), QBrush(QColor("#E8EEF7"))
        )
        self._spoke = self._scene.addLine(0, 0, 0, 0, QPen(QColor("gray"), 1.0))

        elastic_pen = QPen(QColor("#D62728"), 2.0)
        self._elastic_anchor = self._scene.addLine(0, 0, 0, 0, elastic_pen)
        self._elastic_pointer = self._scene.addLine(0, 0, 0, 0, elastic_pen)

        self._wheel = self._add_marker("#1F77B4")
        self._anchor = self._add_marker("black")
        self._pointer = self._add_marker("#2CA02C")

        store.machine_changed.connect(self.update_machine)
        store.options_changed.connect(self.apply_options)
        self.update_machine(store.machine)
        self.apply_options(store.options)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_machine(self, machine: Machine) -> None:
        """Move all items to the positions of `machine`."""
        ax, ay = self.view_transform.to_screen(machine.anchor)
        px, py = self.view_transform.to_screen(machine.pointer)
        wx, wy = self.view_transform.to_screen(machine.wheel)
        cx, cy = self.view_transform.to_screen(Vector2(0.0, 0.0))

        self._spoke.setLine(cx, cy, wx, wy)
        self._elastic_anchor.setLine(ax, ay, wx, wy)
        self._elastic_pointer.setLine(px, py, wx, wy)
        self._place_marker(self._wheel, wx, wy)
        self._place_marker(self._anchor, ax, ay)
        self._place_marker(self._pointer, px, py)

    def apply_options(self, options: DisplayOptions) -> None:
        self._elastic_anchor.setVisible(options.show_elastics)
        self._elastic_pointer.setVisible(options.show_elastics)
        for item in self._grid_items:
            item.setVisible(options.show_grid)
        self.setCursor(
            Qt.CursorShape.ForbiddenCursor if options.pointer_locked else Qt.CursorShape.CrossCursor
        )

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._pointer_event(event)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self._dragging:
            self._pointer_event(event)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _pointer_event(self, event) -> None:
        scene_pos = self.mapToScene(event.position().toPoint())
        self.store.move_pointer(self.view_transform.to_model(scene_pos.x(), scene_pos.y()))

    def _add_marker(self, color: str) -> QGraphicsEllipseItem:
        item = self._scene.addEllipse(QRectF(), QPen(QColor(color)), QBrush(QColor(color)))
        item.setZValue(1.0)
        return item

    def _place_marker(self, item: QGraphicsEllipseItem, x: float, y: float) -> None:
        r = MARKER_RADIUS * PIXELS_PER_UNIT
        item.setRect(QRectF(x - r, y - r, 2 * r, 2 * r))

    def _build_grid(self) -> list[QGraphicsLineItem]:
        pen = QPen(QColor("#DDDDDD"), 0.5)
        extent = SCENE_EXTENT * PIXELS_PER_UNIT
        items = []
        for k in range(-int(SCENE_EXTENT), int(SCENE_EXTENT) + 1):
            offset = k * PIXELS_PER_UNIT
            items.append(self._scene.addLine(offset, -extent, offset, extent, pen))
            items.append(self._scene.addLine(-extent, offset, extent, offset, pen))
        for item in items:
            item.setZValue(-1.0)
        return items
