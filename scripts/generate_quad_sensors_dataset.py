"""
Generate Quadrotor Onboard Sensors Dataset (GPS + IMU + Magnetometer + Barometer).

This script flies a level circular trajectory around the home location and
records the readings of the full sensor suite at every simulation tick.
Useful as input for attitude/position estimators and for checking the sensor
models end to end.

Key Learning Objectives:
    - Magnetometer body-frame field rotates with heading (Earth field model)
    - IMU sees centripetal acceleration plus the gravity reaction
    - GPS course over ground follows the velocity direction
    - Barometer altitude and temperature follow the ISA troposphere

Saves to: data/sim/quad_sensors_circle/ (default)
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Dict, Optional

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from quadsensors.config import PRESETS, QuadSensorConfig
from quadsensors.coords.rotations import euler_to_dcm_be
from quadsensors.sensors import QuadSensorSuite, VehicleState


def generate_circle_trajectory(
    duration: float = 60.0,
    dt: float = 0.01,
    radius: float = 20.0,
    speed: float = 5.0,
    altitude: float = 10.0,
) -> Dict[str, np.ndarray]:
    """
    Generate a level, constant-speed circle starting at home heading North.

    Args:
        duration: Total duration in seconds.
        dt: Time step in seconds.
        radius: Circle radius in meters.
        speed: Ground speed in m/s.
        altitude: Height above home in meters.

    Returns:
        Dict of arrays (N = number of ticks):
            t: timestamps (N,)
            pos_ned: positions relative to home (N, 3) [m]
            vel_ned: NED velocities (N, 3) [m/s]
            acc_ned: NED kinematic accelerations (N, 3) [m/s²]
            yaw: headings (N,) [rad]
            omega: yaw rate (scalar array) [rad/s]
    """
    t = np.arange(0.0, duration, dt)
    w = speed / radius
    phase = w * t

    pos_ned = np.column_stack(
        [radius * np.sin(phase), radius * (1.0 - np.cos(phase)), -altitude * np.ones_like(t)]
    )
    vel_ned = np.column_stack(
        [speed * np.cos(phase), speed * np.sin(phase), np.zeros_like(t)]
    )
    acc_ned = np.column_stack(
        [-speed * w * np.sin(phase), speed * w * np.cos(phase), np.zeros_like(t)]
    )

    return {
        't': t,
        'pos_ned': pos_ned,
        'vel_ned': vel_ned,
        'acc_ned': acc_ned,
        'yaw': phase,
        'omega': np.array(w),
    }


def run_sensor_suite(
    traj: Dict[str, np.ndarray],
    config: QuadSensorConfig,
    seed: int = 42,
) -> Dict[str, np.ndarray]:
    """
    Run the sensor suite over a trajectory.

    Returns:
        Dict with gps (N, 8), imu (N, 6), mag (N, 3), baro (N, 4) arrays.
    """
    suite = QuadSensorSuite.from_config(config, rng=np.random.default_rng(seed))

    N = len(traj['t'])
    gps = np.zeros((N, 8))
    imu = np.zeros((N, 6))
    mag = np.zeros((N, 3))
    baro = np.zeros((N, 4))

    omega_b = np.array([0.0, 0.0, float(traj['omega'])])

    for k in range(N):
        dcm_be = euler_to_dcm_be(0.0, 0.0, traj['yaw'][k])
        state = VehicleState(
            pos_ned=traj['pos_ned'][k],
            vel_ned=traj['vel_ned'][k],
            acc_b=dcm_be @ traj['acc_ned'][k],
            omega_b=omega_b,
            dcm_be=dcm_be,
        )
        suite.update(state)

        gps[k, :3] = suite.gps.lat_lon_alt
        gps[k, 3:6] = suite.gps.gps_speed
        gps[k, 6] = suite.gps.ground_speed
        gps[k, 7] = suite.gps.cog
        imu[k, :3] = suite.imu.acc
        imu[k, 3:] = suite.imu.gyro
        mag[k] = suite.mag.mag_field
        baro[k] = [
            suite.baro.pressure,
            suite.baro.pressure_alt,
            suite.baro.diff_pressure,
            suite.baro.temperature,
        ]

        if N >= 10 and (k + 1) % (N // 10) == 0:
            print(f"  Step {k + 1}/{N} ({100.0 * (k + 1) / N:.0f}%)")

    return {'gps': gps, 'imu': imu, 'mag': mag, 'baro': baro}


def save_dataset(
    output_dir: Path,
    traj: Dict[str, np.ndarray],
    readings: Dict[str, np.ndarray],
    config: Dict,
) -> None:
    """Save dataset to disk."""
    output_dir.mkdir(parents=True, exist_ok=True)

    # Ground truth
    np.savetxt(output_dir / "time.txt", traj['t'], fmt="%.6f", header="time (s)")
    np.savetxt(
        output_dir / "truth_position_ned.txt",
        traj['pos_ned'],
        fmt="%.6f",
        header="north (m), east (m), down (m)",
    )
    np.savetxt(
        output_dir / "truth_velocity_ned.txt",
        traj['vel_ned'],
        fmt="%.6f",
        header="vn (m/s), ve (m/s), vd (m/s)",
    )
    np.savetxt(
        output_dir / "truth_yaw.txt",
        traj['yaw'],
        fmt="%.6f",
        header="yaw (rad)",
    )

    # Sensor readings
    np.savetxt(
        output_dir / "gps.txt",
        readings['gps'],
        fmt="%.9f",
        header="lat (deg), lon (deg), alt (m), vn (m/s), ve (m/s), vd (m/s), "
        "ground_speed (m/s), cog (deg)",
    )
    np.savetxt(
        output_dir / "imu.txt",
        readings['imu'],
        fmt="%.6f",
        header="ax (m/s2), ay (m/s2), az (m/s2), gx (rad/s), gy (rad/s), gz (rad/s)",
    )
    np.savetxt(
        output_dir / "mag.txt",
        readings['mag'],
        fmt="%.6f",
        header="mx (Gauss), my (Gauss), mz (Gauss)",
    )
    np.savetxt(
        output_dir / "baro.txt",
        readings['baro'],
        fmt="%.6f",
        header="pressure (hPa), pressure_alt (m), diff_pressure (hPa), temperature (C)",
    )

    with open(output_dir / "config.json", "w") as f:
        json.dump(config, f, indent=2)

    print(f"\n  Saved dataset to: {output_dir}")
    print(f"    Files: 9 files (time, truth x3, gps, imu, mag, baro, config)")
    print(f"    Samples: {len(traj['t'])}")


def generate_dataset(
    output_dir: Optional[str] = "data/sim/quad_sensors_circle",
    preset: str = "deterministic",
    duration: float = 60.0,
    dt: float = 0.01,
    radius: float = 20.0,
    speed: float = 5.0,
    altitude: float = 10.0,
    seed: int = 42,
) -> Dict[str, np.ndarray]:
    """
    Generate the quadrotor sensors dataset.

    Args:
        output_dir: Output directory path. None skips writing to disk.
        preset: Name of a quadsensors.config.PRESETS entry.
        duration: Total duration (s).
        dt: Time step (s).
        radius: Circle radius (m).
        speed: Ground speed (m/s).
        altitude: Height above home (m).
        seed: Random seed for the noise source.

    Returns:
        Dict with the trajectory arrays and the gps/imu/mag/baro readings.
    """
    sensor_config = QuadSensorConfig.from_preset(preset)

    print("\n" + "=" * 70)
    print("Generating Quadrotor Sensors Dataset")
    print("=" * 70)
    print(f"  Preset: {preset} ({PRESETS[preset]['description']})")
    print(f"  Duration: {duration:.1f} s at dt = {dt} s")
    print(f"  Circle: radius {radius:.1f} m, speed {speed:.1f} m/s, altitude {altitude:.1f} m")

    t_start = time.time()

    traj = generate_circle_trajectory(duration, dt, radius, speed, altitude)
    readings = run_sensor_suite(traj, sensor_config, seed=seed)

    print(f"  Simulated {len(traj['t'])} ticks in {time.time() - t_start:.2f} s")

    if output_dir is not None:
        config = {
            "dataset": "quad_sensors_circle",
            "preset": preset,
            "trajectory": {
                "duration_s": duration,
                "dt_s": dt,
                "radius_m": radius,
                "speed_mps": speed,
                "altitude_m": altitude,
            },
            "sensors": sensor_config.to_dict(),
            "seed": seed,
        }
        save_dataset(Path(output_dir), traj, readings, config)

    print("\n" + "=" * 70)
    print("Dataset generation complete!")
    print("=" * 70)

    return {**traj, **readings}


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate Quadrotor Onboard Sensors Dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Presets:
  deterministic   Noise disabled (bit-identical runs)
  nominal         Reference sensor noise levels
  degraded        5x reference noise levels

Examples:
  # Generate noise-free dataset
  python scripts/generate_quad_sensors_dataset.py

  # Noisy dataset with a wider, faster circle
  python scripts/generate_quad_sensors_dataset.py \\
      --preset nominal --radius 50 --speed 10 \\
      --output data/sim/quad_sensors_nominal
        """,
    )

    parser.add_argument(
        "--preset",
        type=str,
        default="deterministic",
        choices=sorted(PRESETS),
        help="Sensor noise preset (default: deterministic)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/sim/quad_sensors_circle",
        help="Output directory (default: data/sim/quad_sensors_circle)",
    )

    traj_group = parser.add_argument_group("Trajectory Parameters")
    traj_group.add_argument(
        "--duration", type=float, default=60.0, help="Total duration in seconds (default: 60.0)"
    )
    traj_group.add_argument(
        "--dt", type=float, default=0.01, help="Time step in seconds (default: 0.01)"
    )
    traj_group.add_argument(
        "--radius", type=float, default=20.0, help="Circle radius in meters (default: 20.0)"
    )
    traj_group.add_argument(
        "--speed", type=float, default=5.0, help="Ground speed in m/s (default: 5.0)"
    )
    traj_group.add_argument(
        "--altitude", type=float, default=10.0, help="Height above home in meters (default: 10.0)"
    )

    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")

    args = parser.parse_args()

    generate_dataset(
        output_dir=args.output,
        preset=args.preset,
        duration=args.duration,
        dt=args.dt,
        radius=args.radius,
        speed=args.speed,
        altitude=args.altitude,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
