# zoneplanner/main.py
import argparse
import sys
from zoneplanner.application import ZonePlannerApplication


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="zoneplanner - Cluster a day's orders into soft zones, one per route"
    )

    parser.add_argument(
        "--dataset",
        "-d",
        required=True,
        help="Dataset file name in the dataset directory (e.g., c101.txt)",
    )

    parser.add_argument(
        "--routes",
        "-r",
        required=True,
        type=int,
        help="Number of routes (zones) to cluster the orders into.",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Seed for centroid seeding"
    )

    parser.add_argument(
        "--csv", action="store_true", help="Read the dataset as a CSV with x/y columns"
    )

    parser.add_argument(
        "--compare",
        action="store_true",
        help="Benchmark the clustering against scikit-learn KMeans",
    )

    parser.add_argument(
        "--no-viz", action="store_true", help="Disable visualization saving"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        app = ZonePlannerApplication(route_count=args.routes, seed=args.seed)

        result = app.run_full_workflow(
            dataset_name=args.dataset,
            csv=args.csv,
            compare=args.compare,
            save_visualizations=not args.no_viz,
        )

        if not result.succeeded:
            return 1

        print("\nWorkflow completed successfully!")
        return 0

    except Exception as e:
        print(f"Error: {str(e)}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
