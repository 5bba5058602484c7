# run_growth_report.py

import pandas as pd

# Import our project modules
import utils as u
import growth_model as gm
import operation_counter as oc
import complexity_examples as ce

TABLE_SIZES = [1, 2, 4, 8, 16, 32]

# --- Main Report Execution Block ---
if __name__ == "__main__":
    print("#" * 80 + "\n### BIG-O GROWTH REPORT ###\n" + "#" * 80)

    # 1. The comparison table every complexity class is measured against
    growth_table = gm.build_growth_table(TABLE_SIZES)
    print("\n--- Steps Needed for n Items ---")
    print(growth_table.to_string(float_format=lambda v: f"{v:,.0f}"))
    u.save_dataframe_csv(growth_table, "growth_table.csv")
    u.plot_growth_curves(growth_table, f"{u.DEFAULT_REPORT_DIR}/growth_curves.png")

    # 2. Count, classify and plot every example
    print("\n--- Counting Steps and Classifying Growth ---")
    classification = {}
    for name, (_, expected) in ce.examples_collection.items():
        sizes = oc.SAMPLE_SIZES[expected]
        measured = oc.measure_growth(name, sizes)
        ranking = gm.classify_growth(measured['n'], measured['steps'])
        detected = ranking.index[0]

        classification[name] = {
            'expected': expected,
            'detected': detected,
            'MAPE': ranking.loc[detected, 'MAPE'],
        }

        safe_name = u.make_safe_filename(name)
        fit = gm.fit_complexity_class(measured['n'], measured['steps'], detected)
        chart_path = f"{u.DEFAULT_REPORT_DIR}/growth_{safe_name}.png"
        u.plot_measured_vs_fitted(measured['n'], measured['steps'], fit['fitted'],
                                  f"{name}: counted steps vs. {detected}", chart_path)
        u.save_dataframe_csv(ranking, f"ranking_{safe_name}.csv")
        print(f"Generated plot for '{name}': {chart_path}")

    # 3. Final comparison table
    summary_df = pd.DataFrame.from_dict(classification, orient='index')
    print("\n--- Expected vs. Detected Complexity ---")
    print(summary_df.to_string(formatters={'MAPE': '{:.2%}'.format}))
    u.save_dataframe_csv(summary_df, "classification_summary.csv")

    print("\n--- Summary ---")
    print(u.summarize_classification(classification))

    print("\n" + "#" * 80 + "\n### REPORT COMPLETE ###\n" + "#" * 80)
