from localizecss.parser.csv_parser import load_csv, parse_line, parse_lines

__all__ = ["load_csv", "parse_line", "parse_lines"]
