import json
from collections import Counter
from datetime import datetime

import matplotlib.pyplot as plt


class SimulationStatistics:
    """
    Records every tick of a building simulation.

    Features:
    - Per-tick trajectory (floor, door, command)
    - Reset history with causes
    - Per-rider metrics (waiting and traveling ticks)
    - JSON Lines event log for offline playback
    - Trajectory diagram (floor over time)
    """
    def __init__(self):
        self.trajectory = []       # [(time, floor)]
        self.reset_history = []    # [(time, cause)]
        self.riders = []           # Registered Rider objects
        self.delivered = []        # Riders that reached their destination
        self.applied_commands = Counter()

        # JSON Lines event log for offline playback
        self.event_log = []
        self.simulation_metadata = {}

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def register_rider(self, time, rider):
        self.riders.append(rider)
        self._add_event_log(time, 'rider_added', rider.to_dict())

    def record_tick(self, time, report):
        """
        Record the outcome of one tick

        Args:
            time: Simulation time of the tick
            report: TickReport returned by Building.tick()
        """
        self.trajectory.append((time, report.floor))
        if report.applied:
            self.applied_commands[report.command.value] += 1
        else:
            self.reset_history.append((time, report.cause))
        self.delivered.extend(report.delivered)
        self._add_event_log(time, 'tick', report.to_dict())

    @property
    def tick_count(self):
        return len(self.trajectory)

    @property
    def reset_count(self):
        return len(self.reset_history)

    def summary(self) -> dict:
        """Aggregate metrics over everything recorded so far"""
        waiting = [rider.waiting_ticks for rider in self.delivered]
        traveling = [rider.traveling_ticks for rider in self.delivered]
        return {
            'ticks': self.tick_count,
            'resets': self.reset_count,
            'riders_added': len(self.riders),
            'riders_delivered': len(self.delivered),
            'commands': dict(self.applied_commands),
            'average_waiting_ticks': sum(waiting) / len(waiting) if waiting else None,
            'average_traveling_ticks': sum(traveling) / len(traveling) if traveling else None,
        }

    def print_summary(self):
        summary = self.summary()
        print("\n" + "=" * 60)
        print("   SIMULATION SUMMARY")
        print("=" * 60)
        print(f"  Ticks:            {summary['ticks']:>6}")
        print(f"  Resets:           {summary['resets']:>6}")
        print(f"  Riders added:     {summary['riders_added']:>6}")
        print(f"  Riders delivered: {summary['riders_delivered']:>6}")
        for command, count in sorted(summary['commands'].items()):
            print(f"  {command:<8}          {count:>6}")
        if summary['average_waiting_ticks'] is not None:
            print(f"  Average waiting:   {summary['average_waiting_ticks']:>6.2f} ticks")
            print(f"  Average traveling: {summary['average_traveling_ticks']:>6.2f} ticks")
        if self.reset_history:
            print("\nReset causes:")
            for cause, count in Counter(cause for _, cause in self.reset_history).most_common():
                print(f"  {count:>4} x {cause}")
        print("=" * 60)

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            # Write metadata as first line
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """
        Draw the floor of the car over time, with resets marked

        Args:
            output_filename: PNG file to write
            show: Also open an interactive window
        """
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        fig = plt.figure(figsize=(14, 8))

        if self.trajectory:
            times, floors = zip(*self.trajectory)
            plt.step(times, floors, where='post', label='Car', linewidth=2.5, color='#1f77b4', alpha=0.8)

        floor_at = dict(self.trajectory)
        for time, _ in self.reset_history:
            plt.scatter(time, floor_at.get(time, 0), marker='x', color='#d62728', s=80, zorder=3)

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (ticks)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        if self.trajectory:
            plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
        return output_filename

    def _add_event_log(self, time, event_type, event_data):
        self.event_log.append({
            "time": time,
            "type": event_type,
            "data": event_data
        })
