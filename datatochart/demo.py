# demo.py
# Fixed sample data behind the "Load Demo Data" button.

DEMO_FORMAT = "csv"

DEMO_CSV = """product,sales,month,category
Widget A,145,January,Electronics
Widget B,98,January,Home
Widget A,165,February,Electronics
Widget B,112,February,Home
Widget A,157,March,Electronics
Widget B,124,March,Home
Widget A,184,April,Electronics
Widget B,138,April,Home
Widget C,56,January,Office
Widget C,68,February,Office
Widget C,79,March,Office
Widget C,92,April,Office
Widget D,43,January,Garden
Widget D,51,February,Garden
Widget D,64,March,Garden
Widget D,75,April,Garden"""
