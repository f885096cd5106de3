# zoneplanner/infrastructure/io/solomon_reader.py
from typing import List, Tuple
from zoneplanner.core.entities.point import Point2D


class SolomonReader:
    """
    Parser for Solomon VRPTW benchmark dataset files.

    Customer rows become order locations; the first row (customer 0) is the
    depot and is returned separately.
    """

    def __init__(self, file_path: str):
        """
        Initialize the Solomon dataset reader.

        Args:
            file_path: Path to the Solomon VRPTW instance file.
        """
        self.file_path = file_path
        self.num_vehicles = 0
        self.vehicle_capacity = 0.0
        self.depot = None
        self.orders = []

    def read(self) -> Tuple[List[Point2D], int]:
        """
        Read and parse the Solomon dataset.

        Returns:
            A tuple containing:
            - List of order locations (depot excluded).
            - Number of vehicles specified in the dataset.
        """
        with open(self.file_path, "r") as file:
            lines = file.readlines()

        # Find vehicle info
        vehicle_info_found = False
        customer_data_start_idx = 0

        for idx, line in enumerate(lines):
            if line.strip().startswith("NUMBER"):
                # The next line contains the numbers
                parts = lines[idx + 1].strip().split() if idx + 1 < len(lines) else []
                if len(parts) >= 2:
                    self.num_vehicles = int(parts[0])
                    self.vehicle_capacity = float(parts[1])
                    vehicle_info_found = True
                    customer_data_start_idx = idx + 2
                    break

        if not vehicle_info_found:
            raise ValueError("Vehicle information not found in the dataset")

        # Find the header line for customer data
        for idx in range(customer_data_start_idx, len(lines)):
            if lines[idx].strip().startswith("CUST NO"):
                customer_data_start_idx = idx + 1
                break

        locations = []
        for line in lines[customer_data_start_idx:]:
            parts = line.strip().split()
            if len(parts) >= 3 and parts[0].isdigit():
                try:
                    locations.append(Point2D(x=float(parts[1]), y=float(parts[2])))
                except ValueError:
                    continue  # Skip lines with parsing errors

        if not locations:
            raise ValueError(f"No customer rows found in {self.file_path}")

        self.depot = locations[0]
        self.orders = locations[1:]
        return self.orders, self.num_vehicles
