"""Planificador - scenario form and result views."""

import logging
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent))

from planificador.client.solver import SolverClient
from planificador.config import get_settings
from planificador.core.entities import ViewTab
from planificador.core.scenario import draft_from_form
from planificador.results.views import build_view, quick_metrics
from planificador.session.controller import RequestController

from app.components.result_views import render_quick_metrics, render_view

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Planificador de hospitales",
    page_icon="🏥",
    layout="wide",
)

settings = get_settings()

# One controller per browser session
if "controller" not in st.session_state:
    st.session_state.controller = RequestController(
        SolverClient.from_settings(settings),
        discard_stale=settings.discard_stale_responses,
    )

controller: RequestController = st.session_state.controller
TABS = list(ViewTab)


def _on_tab_change() -> None:
    controller.select_tab(st.session_state.view_tab)


# ===== HEADER =====
header_col, badge_col = st.columns([4, 1])
with header_col:
    st.caption("Simulación educativa")
    st.title("Planificador de hospitales con K-means")
    st.markdown(
        "Construye escenarios para ubicar hospitales en una cuadrícula m × m "
        "(cada unidad equivale a 1 km) y observa el impacto en las distancias."
    )
with badge_col:
    st.success("Backend conectado")
    st.code(settings.display_host, language=None)

form_col, visual_col = st.columns([1, 2])

# ===== SCENARIO FORM =====
with form_col:
    st.header("Parámetros de simulación")
    st.caption(
        "Ajusta los valores y ejecuta la simulación para generar vecindarios "
        "sintéticos y ubicar K hospitales automáticamente."
    )

    draft = controller.state.draft
    with st.form("scenario_form"):
        m = st.number_input("Tamaño de la cuadrícula (m)", value=int(draft.m), step=1)
        num_neighborhoods = st.number_input(
            "Número de vecindarios", value=int(draft.num_neighborhoods), step=1,
        )
        k = st.number_input("Número de hospitales (K)", value=int(draft.k), step=1)
        random_seed = st.text_input(
            "Semilla aleatoria (opcional)",
            value="" if draft.random_seed is None else str(int(draft.random_seed)),
        )
        # Submission runs synchronously; st.spinner below is the loading indicator
        submitted = st.form_submit_button("Simular", type="primary", use_container_width=True)

    if submitted:
        with st.spinner("Calculando…"):
            controller.submit_draft(draft_from_form(m, num_neighborhoods, k, random_seed))

    state = controller.state

    if state.error:
        st.error(state.error)

    if state.result is not None:
        render_quick_metrics(quick_metrics(state.result.metrics))
    else:
        st.caption(
            "Después de simular verás aquí las distancias promedio, la inercia y "
            "las iteraciones empleadas por K-means."
        )

    with st.expander("¿Qué significa cada métrica?"):
        st.markdown("""
- **Distancia promedio:** traslado típico desde un vecindario al hospital más cercano.
- **Inercia:** suma de distancias al cuadrado; indica qué tan compactos son los clusters.
- **Iteraciones:** pasos necesarios para converger; ayuda a entender la estabilidad del modelo.
""")

# ===== RESULT VIEWS =====
with visual_col:
    state = controller.state
    if state.result is None:
        st.info(
            "Aún no hay resultados. Configura una simulación y observa cómo se "
            "distribuyen los vecindarios por hospital."
        )
    else:
        # Keep the widget in step with the state machine (it resets on new results)
        st.session_state.view_tab = state.active_tab
        st.radio(
            "Vista",
            TABS,
            key="view_tab",
            format_func=lambda tab: tab.label,
            horizontal=True,
            label_visibility="collapsed",
            on_change=_on_tab_change,
        )
        render_view(build_view(controller.state.active_tab, state.result))

st.divider()

st.header("¿Cómo interpretar estos resultados?")
st.markdown("""
K-means agrupa vecindarios por proximidad y cada grupo recibe un hospital. El término
*cluster* alude al conjunto de puntos que comparten el mismo hospital más cercano.
Las distancias que ves (en km) aproximan el esfuerzo de traslado.

Usa los gráficos para detectar saturaciones: si un hospital concentra demasiados
vecindarios o tiene distancias medias altas, quizá debas incrementar K o reajustar
parámetros como m y la semilla.
""")
