"""HTTP and WebSocket front end for the elevator simulation."""
