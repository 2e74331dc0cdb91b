#!/usr/bin/env python3
"""
HTTP Server for Building Status
Exposes the building state and lets clients add riders or advance a tick
"""
import threading

from flask import Flask, jsonify, request
from flask_cors import CORS

from simulator.exceptions import EngineBrokenError


def create_app(building, lock=None):
    """
    Create the Flask application for a building

    Args:
        building: Building to expose
        lock: Lock held while touching the building (shared with the tick loop)
    """
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    lock = lock if lock is not None else threading.Lock()

    @app.route('/api/status')
    def status():
        """Server status endpoint"""
        return jsonify({
            'status': 'ok',
            'server': 'Building Status HTTP Server',
            'version': '1.0'
        })

    @app.route('/api/building')
    def get_building():
        """Current floor, door and riders"""
        with lock:
            return jsonify(building.snapshot())

    @app.route('/api/riders', methods=['POST'])
    def add_rider():
        """
        Add a rider
        JSON body (optional):
            - origin: floor where the rider calls (default: random)
            - destination: floor to reach (default: random)
        """
        data = request.get_json(silent=True) or {}
        try:
            with lock:
                rider = building.add_rider(data.get('origin'), data.get('destination'))
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except EngineBrokenError as e:
            return jsonify({'error': e.message}), 503

        if rider is None:
            return jsonify({'added': False, 'reason': 'building is full'})
        return jsonify({'added': True, 'rider': rider.to_dict()}), 201

    @app.route('/api/tick', methods=['POST'])
    def tick():
        """Advance the building by one tick"""
        with lock:
            report = building.tick()
        return jsonify(report.to_dict())

    return app


def run_server(app, host='localhost', port=5000, debug=False):
    """Run the Flask server"""
    print(f"Starting HTTP server on http://{host}:{port}")
    print(f"API endpoints:")
    print(f"  - GET  /api/status")
    print(f"  - GET  /api/building")
    print(f"  - POST /api/riders")
    print(f"  - POST /api/tick")

    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)
