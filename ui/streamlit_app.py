import pandas as pd
import requests
import streamlit as st

from app.api_client import create_run, delete_run, error_message, health, list_runs

st.set_page_config(page_title="Running Tracker", layout="wide")

st.title("Running Tracker")
try:
    status = health()
    st.caption(f"API {status['status']} at {status['timestamp']}")
except requests.RequestException:
    st.caption("API unreachable")

tab_log, tab_history = st.tabs(["Log a run", "History"])


with tab_log:
    st.subheader("New run")

    col1, col2 = st.columns(2)

    with col1:
        date = st.date_input("Date", value=pd.Timestamp.today())
        location = st.text_input("Location (optional)", value="")

    with col2:
        distance = st.number_input("Distance (km)", min_value=0.1, max_value=200.0, value=5.0, step=0.1)
        duration = st.number_input("Duration (min)", min_value=1, max_value=1440, value=30, step=1)

    if st.button("Save run", type="primary"):
        payload = {
            "date": date.isoformat(),
            "distance": float(distance),
            "duration": int(duration),
            "location": location.strip() or None,
        }

        try:
            created = create_run(payload)
            st.success(f"Run #{created['id']} saved, pace **{created['pace']} /km**")
        except requests.HTTPError as e:
            st.error(error_message(e))
        except requests.RequestException as e:
            st.exception(e)


with tab_history:
    st.subheader("History")

    try:
        df = pd.DataFrame(list_runs())

        if df.empty:
            st.warning("No runs yet. Log one in the first tab.")
        else:
            df["date"] = pd.to_datetime(df["date"], errors="coerce")

            col_m1, col_m2 = st.columns(2)
            col_m1.metric("Runs", len(df))
            col_m2.metric("Total distance", f"{df['distance'].sum():.1f} km")

            st.dataframe(df, use_container_width=True, hide_index=True)

            st.markdown("### Distance per run")
            st.bar_chart(df.set_index("id")["distance"])

            col_d1, col_d2 = st.columns([1, 3])
            with col_d1:
                run_id = st.selectbox("Run to delete", df["id"].tolist())
            with col_d2:
                if st.button("Delete run"):
                    try:
                        delete_run(int(run_id))
                        st.rerun()
                    except requests.HTTPError as e:
                        st.error(error_message(e))

    except requests.RequestException as e:
        st.exception(e)
