import os
import requests
import streamlit as st

DEFAULT_API_URL = os.getenv("SEARCH_API_URL", "http://localhost:8081/image-search/cars")

st.set_page_config(page_title="Car Image Search", page_icon="🚗", layout="centered")
st.title("🚗 Find a car by photo")

# ----- state -----
if "api_url" not in st.session_state:
    st.session_state.api_url = DEFAULT_API_URL

# ----- sidebar -----
with st.sidebar:
    st.header("Settings")
    st.session_state.api_url = st.text_input("API URL", value=st.session_state.api_url, help="e.g. http://localhost:8081/image-search/cars")

def call_api(name: str, data: bytes, mime: str):
    r = requests.post(
        st.session_state.api_url,
        files={"file": (name, data, mime)},
        timeout=60,
    )
    if r.status_code >= 400:
        # hard failure; FastAPI puts the message in "detail"
        raise RuntimeError(r.json().get("detail", r.text))
    return r.json()

uploaded = st.file_uploader("Upload a car photo", type=["jpg", "jpeg", "png", "webp"])

if uploaded is not None:
    st.image(uploaded, use_container_width=True)
    if st.button("🔍 Search"):
        try:
            with st.spinner("Analyzing image…"):
                data = call_api(uploaded.name, uploaded.getvalue(), uploaded.type or "application/octet-stream")
        except (requests.RequestException, RuntimeError) as e:
            st.error(f"Image search failed: {e}")
        else:
            if not data.get("success"):
                st.warning(data.get("error", "Could not read this image."))
            else:
                attrs = data["data"]
                cols = st.columns(4)
                cols[0].metric("Make", attrs["make"] or "—")
                cols[1].metric("Body type", attrs["bodyType"] or "—")
                cols[2].metric("Color", attrs["color"] or "—")
                cols[3].metric("Confidence", f"{attrs['confidence']:.0%}")
                cars = data.get("cars") or []
                st.subheader(f"Matching cars ({len(cars)})")
                for car in cars:
                    st.markdown(f"**{car['year']} {car['make']} {car['model']}** · {car['body_type']} · {car['color']} · ${car['price']:,.0f}")
                with st.expander("Raw response"):
                    st.json(data)
