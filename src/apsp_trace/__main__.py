from apsp_trace.scripts.solve_matrix import main


if __name__ == '__main__':
    raise SystemExit(main())
