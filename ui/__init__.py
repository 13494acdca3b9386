"""
UI Package

Streamlit front-end for the prediction client.
Run with: streamlit run ui/streamlit_app.py
"""
