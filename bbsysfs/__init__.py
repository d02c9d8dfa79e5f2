"""Access BeagleBone LEDs, GPIO pins, PWM outputs and ADC inputs through Linux sysfs."""

__version__ = "0.1.0"
__all__ = ["sysfs", "analog", "led", "pwm", "gpio"]