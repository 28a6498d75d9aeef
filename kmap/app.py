import logging
import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import matplotlib.pyplot as plt
import numpy as np

from kmap.espresso import espresso_solve
from kmap.grid import GRAY, CellValue, Coord, KMapGrid
from kmap.kmap_engine import cube_fragments
from kmap.latex import generate_latex_code, generate_latex_document
from kmap.logic import cover_function_text, get_variables, simplify_from_minterms

logging.basicConfig(level=os.environ.get("KMAP_LOG_LEVEL", "WARNING").upper())
log = logging.getLogger("kmap.app")

# ------------------------------- إعداد الواجهة -------------------------------

COLOR_PALETTE = [
    "#e53935", "#1e88e5", "#43a047", "#f39c12",
    "#8e24aa", "#009688", "#6d4c41", "#2e86c1",
]
CELL_TEXT = {CellValue.FALSE: "0", CellValue.TRUE: "1", CellValue.DONT_CARE: "X"}
CELL_COLOR = {
    CellValue.FALSE: "#9aa7b7",
    CellValue.TRUE: "#1f3c88",
    CellValue.DONT_CARE: "#ff8c32",
}

st.set_page_config(page_title="K-Map Simplifier", layout="wide")
st.title("🧮 K-Map Simplifier (pseudo-ESPRESSO)")
st.markdown("---")

n = int(st.number_input("عدد المتغيرات:", min_value=2, max_value=5, value=4, step=1))
allow_dc = st.checkbox("Allow don't care (X)", value=False)


def current_grid() -> KMapGrid:
    """Grid kept across reruns; a new variable count starts a fresh map."""
    grid = st.session_state.get("grid")
    if grid is None or grid.nvars != n:
        grid = KMapGrid(n, allow_dont_care=allow_dc)
        st.session_state["grid"] = grid
    if grid.allow_dont_care != allow_dc:
        grid.set_dont_care_allowed(allow_dc)
    return grid


def axis_labels(grid: KMapGrid):
    names = grid.variable_names()
    skip = grid.levels - 1
    x_names = "".join(names[skip:skip + grid.nvar_x])
    y_names = "".join(names[skip + grid.nvar_x:])
    cols = [f"{x_names}={GRAY[w]:0{grid.nvar_x}b}" for w in range(grid.width)]
    rows = [f"{y_names}={GRAY[h]:0{grid.nvar_y}b}" for h in range(grid.height)]
    return cols, rows


grid = current_grid()
col_labels, row_labels = axis_labels(grid)

# ------------------------------- إدخال Minterms -------------------------------
with st.expander("تحميل الخريطة من Minterms"):
    raw_mins = st.text_input("أدخل أرقام الـ minterms (مثال: 1,3,5,7):")
    raw_dcs = st.text_input("أدخل أرقام don't care (اختياري):")
    if st.button("تحميل 📥"):
        try:
            mins = [int(x.strip()) for x in raw_mins.split(",") if x.strip()]
            dcs = [int(x.strip()) for x in raw_dcs.split(",") if x.strip()]
            if dcs and not allow_dc:
                raise ValueError("Enable don't care values before entering them.")
            loaded = KMapGrid.from_minterms(n, mins, dcs)
            loaded.set_dont_care_allowed(allow_dc)
            st.session_state["grid"] = grid = loaded
        except ValueError as e:
            st.error(f"حدث خطأ أثناء الحساب:\n{e}")

# ------------------------------- الخلايا القابلة للنقر -------------------------------
st.markdown("### 🗺️ خريطة كارنوف (K-Map)")
st.caption("Click a cell to cycle 0 → 1 → X → 0.")
level_cols = st.columns(grid.levels)
for d, level_col in enumerate(level_cols):
    with level_col:
        if grid.levels == 2:
            st.markdown(f"**{grid.variable_names()[0]} = {d}**")
        header = st.columns(grid.width + 1)
        for w, lab in enumerate(col_labels):
            header[w + 1].caption(lab)
        for h in range(grid.height):
            row = st.columns(grid.width + 1)
            row[0].caption(row_labels[h])
            for w in range(grid.width):
                coord = Coord(w, h, d)
                row[w + 1].button(
                    CELL_TEXT[grid.value(coord)],
                    key=f"cell-{n}-{d}-{w}-{h}",
                    on_click=grid.toggle_cell,
                    args=(coord,),
                    use_container_width=True,
                )

# ------------------------------- الحل -------------------------------
solution = espresso_solve(grid)
patterns = solution.patterns(grid)
function_text = cover_function_text(patterns, grid.variable_names())
log.info("solved %r: %d cubes", grid, len(solution))

st.success(f"**SOP:**  \n{function_text}")

vars_tuple = get_variables(n)
mins = grid.minterms(CellValue.TRUE)
dcs = grid.minterms(CellValue.DONT_CARE)
_, reference_text = simplify_from_minterms(vars_tuple, mins, dcs)
st.info(f"**SymPy SOPform:**  \nF = {reference_text}")

steps = (
    f"• عدد المتغيرات: {n}\n"
    f"• minterms = {mins}\n"
    f"• don't cares = {dcs if dcs else '—'}\n"
    f"• n-cubes = {len(solution)}\n"
    f"• covered cells = {len(solution.cover)}"
)
st.text_area("تفاصيل الحساب:", steps, height=160)

# ------------------------------- رسم التغطية -------------------------------
fig, axes = plt.subplots(1, grid.levels, figsize=(4.2 * grid.levels + 1, 0.9 * grid.height + 1.6))
axes = np.atleast_1d(axes)
for d, ax in enumerate(axes):
    ax.set_xlim(-0.6, grid.width)
    ax.set_ylim(-0.6, grid.height)
    ax.set_xticks(np.arange(0, grid.width + 1))
    ax.set_yticks(np.arange(0, grid.height + 1))
    ax.set_xticklabels([])
    ax.set_yticklabels([])
    ax.grid(True, color="#888", linewidth=1)
    ax.invert_yaxis()
    ax.set_facecolor("#fafafa")
    if grid.levels == 2:
        ax.set_title(f"{grid.variable_names()[0]} = {d}", fontsize=10)

    for w, lab in enumerate(col_labels):
        ax.text(w + 0.5, -0.25, lab, ha="center", va="center", fontsize=9, color="#333")
    for h, lab in enumerate(row_labels):
        ax.text(-0.05, h + 0.5, lab, ha="right", va="center", fontsize=9, color="#333")

    # ---- القيم داخل الخلايا ----
    for h in range(grid.height):
        for w in range(grid.width):
            coord = Coord(w, h, d)
            value = grid.value(coord)
            ax.text(w + 0.5, h + 0.5, CELL_TEXT[value], color=CELL_COLOR[value],
                    fontsize=13, ha="center", va="center", weight="bold")
            ax.text(w + 0.05, h + 0.9, str(grid.minterm(coord)),
                    color="#777", fontsize=8, alpha=0.7)

# ---- المجموعات (n-cubes) ----
for i, cube in enumerate(solution.cubes):
    color = COLOR_PALETTE[i % len(COLOR_PALETTE)]
    inset = 0.05 + 0.05 * (i % 4)
    for d, w0, cols, h0, rows in cube_fragments(cube):
        rect = plt.Rectangle(
            (w0 + inset, h0 + inset), cols - 2 * inset, rows - 2 * inset,
            fill=False, color=color, lw=2.5, ls='-'
        )
        axes[d].add_patch(rect)

st.pyplot(fig)

# ------------------------------- LaTeX -------------------------------
st.markdown("### LaTeX (askmaps)")
st.code(generate_latex_code(grid, solution), language="latex")
st.download_button(
    "تنزيل ملف LaTeX",
    generate_latex_document(grid, solution),
    file_name="kmap.tex",
    mime="text/x-tex",
)
