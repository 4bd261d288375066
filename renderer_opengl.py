# renderer_opengl.py
import logging
from OpenGL.GL import *
from config import (ALIASED_ON_DARK, ALIASED_ON_LIGHT, BACKGROUND_DARK,
                    BACKGROUND_LIGHT, POINT_SIZE)

logger = logging.getLogger(__name__)

class GLRenderer:
    """Draws packed vertex arrays as GL_POINTS in a 2x2 grid of viewports.

    Left column is aliased, right column is Wu; top row on a light
    background, bottom row on a dark one."""

    def __init__(self, w, h):
        self.w = w
        self.h = h
        self._init_gl()

    def _init_gl(self):
        glViewport(0, 0, self.w, self.h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        # depth test would break blending of overlapping Wu samples
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_LIGHTING)
        glPointSize(POINT_SIZE)
        logger.debug("GL renderer %s, version %s",
                     glGetString(GL_RENDERER), glGetString(GL_VERSION))

    def _cell_rect(self, index):
        # 0: top-left, 1: bottom-left, 2: top-right, 3: bottom-right
        hw, hh = self.w // 2, self.h // 2
        x = hw if index >= 2 else 0
        y = 0 if index % 2 else hh
        return x, y, hw, hh

    def clear_cell(self, index, background):
        x, y, cw, ch = self._cell_rect(index)
        glViewport(x, y, cw, ch)
        glEnable(GL_SCISSOR_TEST)
        glScissor(x, y, cw, ch)
        glClearColor(background[0], background[1], background[2], 1.0)
        glClear(GL_COLOR_BUFFER_BIT)
        glDisable(GL_SCISSOR_TEST)

    def draw_points(self, vertices, color):
        """(N, 2) NDC positions in one constant color."""
        if len(vertices) == 0:
            return
        glColor4f(color[0], color[1], color[2], 1.0)
        glBegin(GL_POINTS)
        for x, y in vertices:
            glVertex2f(float(x), float(y))
        glEnd()

    def draw_blended(self, vertices):
        """(N, 6) rows of x, y, r, g, b, alpha; alpha is the Wu coverage."""
        if len(vertices) == 0:
            return
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glBegin(GL_POINTS)
        for x, y, r, g, b, a in vertices:
            glColor4f(float(r), float(g), float(b), float(a))
            glVertex2f(float(x), float(y))
        glEnd()
        glDisable(GL_BLEND)

    def draw_frame(self, aliased_vertices, wu_vertices):
        self.clear_cell(0, BACKGROUND_LIGHT)
        self.draw_points(aliased_vertices, ALIASED_ON_LIGHT)
        self.clear_cell(1, BACKGROUND_DARK)
        self.draw_points(aliased_vertices, ALIASED_ON_DARK)
        self.clear_cell(2, BACKGROUND_LIGHT)
        self.draw_blended(wu_vertices)
        self.clear_cell(3, BACKGROUND_DARK)
        self.draw_blended(wu_vertices)
