"""
Clinical Cohort Dashboard
Patient search, per-patient clinical view and cohort analytics
"""
import streamlit as st
import pandas as pd
import plotly.express as px
from clinical_cohort.core.exceptions import MalformedRecordError
from clinical_cohort.core.logging_setup import setup_logging
from clinical_cohort.services import (
    load_record_store, build_patient_view, trend_frame, buckets_frame,
    by_city, by_primary_condition, by_encounter_type,
    search_suggestions, filter_visible_list,
)

st.set_page_config(page_title="Clinical Cohort Dashboard", layout="wide")
setup_logging(file_name=None)

RISK_COLORS = {"High": "#C62828", "Medium": "#F9A825", "Low": "#2E7D32"}

# Data loading
@st.cache_resource
def get_store():
    try:
        return load_record_store()
    except (FileNotFoundError, ValueError) as e:
        st.error(f"Could not load clinical data: {e}")
        return None

@st.cache_data
def get_patient_view(_store, patient_id):
    return build_patient_view(patient_id, _store)

def show_value(row, unit):
    return "Not available" if row is None else f"{row['value']} {unit}"

store = get_store()
if store is None:
    st.stop()

st.sidebar.title("Clinical Cohort")
view = st.sidebar.radio("View", ["Dashboard", "Search Patients", "Patient Detail", "Analytics"])

# Dashboard
if view == "Dashboard":
    st.title("Clinical Cohort - Dashboard")
    st.markdown("Synthetic cohort of patients with conditions, medications, vitals and encounters")
    st.markdown("---")

    totals = store.counts()
    cols = st.columns(len(totals))
    for col, (name, count) in zip(cols, totals.items()):
        col.metric(name.title(), count)

# Search
elif view == "Search Patients":
    st.title("Search Patients")
    term = st.text_input("Search by name or patient ID")
    results = search_suggestions(store.patients, term)

    if not term.strip():
        st.info("Start typing a name or ID to see matching patients.")
    elif results.empty:
        st.warning("No patients match that search.")
    else:
        st.caption(f"{len(results)} matching patient(s)")
        st.dataframe(
            results[["patient_id", "first_name", "last_name", "age", "gender", "city", "primary_condition_name"]],
            use_container_width=True,
        )

# Patient detail
elif view == "Patient Detail":
    term = st.sidebar.text_input("Filter patients")
    visible = filter_visible_list(store.patients, term)
    if visible.empty:
        st.info("No patients match the filter.")
        st.stop()

    labels = {
        pid: f"{first} {last} ({pid})"
        for pid, first, last in visible[["patient_id", "first_name", "last_name"]].itertuples(index=False)
    }
    patient_id = st.sidebar.selectbox("Patient", list(labels), format_func=labels.get)

    try:
        pv = get_patient_view(store, patient_id)
    except MalformedRecordError as e:
        st.error(str(e))
        st.stop()

    patient = pv.scope.patient
    st.title(f"{patient['first_name']} {patient['last_name']}")
    risk = pv.risk.label.value
    st.markdown(
        f"<span style='color:{RISK_COLORS[risk]};font-weight:600'>{risk} risk</span> "
        f"(score {pv.risk.score})",
        unsafe_allow_html=True,
    )
    st.caption(f"ID: {patient['patient_id']} | {patient['gender']} | Age {patient['age']} | "
               f"{patient['city']}, {patient['state']} | {patient['insurance_type']}")

    s = pv.summary
    col1, col2, col3, col4, col5 = st.columns(5)
    col1.metric("Chronic conditions", s.chronic_count)
    col2.metric("Active meds", s.active_medication_count)
    col3.metric("Encounters", s.encounter_count)
    col4.metric("Latest BP", s.blood_pressure or "Not available")
    col5.metric("Latest HbA1c", "Not available" if s.latest_hba1c is None else f"{s.latest_hba1c}%")

    tab1, tab2, tab3, tab4, tab5 = st.tabs(["Overview", "Conditions", "Medications", "Vitals & Labs", "Encounters"])

    trend = trend_frame(pv.bp_trend)

    with tab1:
        st.markdown("**Blood pressure trend**")
        if trend.empty:
            st.info("No blood pressure readings recorded.")
        else:
            fig = px.line(trend, x="date", y=["sbp", "dbp"], markers=True,
                          labels={"value": "mmHg", "date": "Date", "variable": ""})
            fig.update_layout(height=300)
            st.plotly_chart(fig, use_container_width=True)

    with tab2:
        st.markdown("**Chronic conditions**")
        if pv.scope.chronic_conditions.empty:
            st.info("No chronic conditions recorded.")
        else:
            st.dataframe(pv.scope.chronic_conditions[["condition_name", "condition_code", "onset_date"]],
                         use_container_width=True)
        st.markdown("**All conditions**")
        st.dataframe(pv.scope.conditions, use_container_width=True)

    with tab3:
        st.markdown("**Active medications**")
        if pv.scope.active_medications.empty:
            st.info("No active medications.")
        else:
            st.dataframe(pv.scope.active_medications[["medication_name", "atc_code", "start_date"]],
                         use_container_width=True)
        st.markdown("**Medication history**")
        st.dataframe(pv.scope.medications, use_container_width=True)

    with tab4:
        st.markdown("**Key latest values**")
        last = pv.bp_trend[-1] if pv.bp_trend else None
        bp = f"{last.get('sbp', '-')}/{last.get('dbp', '-')} mmHg" if last else "Not available"
        st.write(f"Blood pressure: {bp}")
        st.write(f"Heart rate: {show_value(pv.latest_vitals['Heart Rate'], 'bpm')}")
        st.write(f"BMI: {show_value(pv.latest_vitals['BMI'], 'kg/m²')}")
        st.write(f"Total cholesterol: {show_value(pv.latest_vitals['Total Cholesterol'], 'mg/dL')}")

        st.markdown("**All observations**")
        history = pv.observation_history
        if history.empty:
            st.info("No observations recorded.")
        else:
            st.dataframe(
                history[["observation_date", "observation_type", "value", "unit",
                         "normal_range_low", "normal_range_high", "out_of_range"]],
                use_container_width=True,
            )
            st.caption(f"Out of range: {int(history['out_of_range'].sum())} of {len(history)}")

    with tab5:
        timeline = pv.encounter_timeline
        if timeline.empty:
            st.info("No encounters recorded.")
        else:
            st.dataframe(
                timeline[["encounter_date", "encounter_type", "department",
                          "length_of_stay_days", "total_cost_usd", "readmitted"]],
                use_container_width=True,
            )
            st.caption(f"Total cost: ${pd.to_numeric(timeline['total_cost_usd'], errors='coerce').sum():,.2f}")

# Analytics
elif view == "Analytics":
    st.title("Cohort Analytics")
    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        st.markdown("**Patients by city**")
        df = buckets_frame(by_city(store.patients), "city")
        fig = px.bar(df, x="city", y="count", text="count", color_discrete_sequence=["#636EFA"])
        fig.update_layout(showlegend=False, height=300)
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        st.markdown("**Patients by primary condition**")
        df = buckets_frame(by_primary_condition(store.patients), "condition")
        fig = px.bar(df, x="condition", y="count", text="count", color_discrete_sequence=["#00CC96"])
        fig.update_layout(showlegend=False, height=300)
        st.plotly_chart(fig, use_container_width=True)

    st.markdown("**Encounters by type**")
    df = buckets_frame(by_encounter_type(store.encounters), "type")
    fig = px.bar(df, x="type", y="count", text="count", color_discrete_sequence=["#AB63FA"])
    fig.update_layout(showlegend=False, height=300)
    st.plotly_chart(fig, use_container_width=True)
    st.caption(f"Total encounters: {int(df['count'].sum())}")
