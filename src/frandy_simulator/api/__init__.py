"""HTTP API — FastAPI server exposing the simulator."""
