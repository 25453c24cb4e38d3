import unittest
from console_helpers import scripted
from simbank.menu import FAREWELL, MenuController
from simbank.session import Session


class TestMenuController(unittest.TestCase):
    def run_menu(self, *answers):
        session = Session(annual_rate=0.05, days_in_year=365)
        console, output = scripted(*answers)
        MenuController(session, console).run()
        return session, output

    def test_menu_lists_six_operations(self):
        _, output = self.run_menu("N")
        for number in range(1, 7):
            self.assertTrue(any(line.startswith(f"[{number}]. ") for line in output))

    def test_register_deposit_withdraw_session(self):
        session, output = self.run_menu(
            "1", "Alice", "Y",
            "2", "500", "Y",
            "3", "600", "200", "N",
        )
        self.assertIn("New Balance: 500.00", output)
        self.assertIn("Insufficient Balance!", output)
        self.assertIn("New Balance: 300.00", output)
        self.assertEqual(output[-1], FAREWELL)
        self.assertTrue(session.closed)

    def test_unrecognized_choice_redisplays_menu(self):
        _, output = self.run_menu("9", "abc", "1", "Bob", "N")
        self.assertEqual(output.count("Invalid choice!"), 2)
        self.assertEqual(output.count("Select Transaction:"), 3)
        self.assertEqual(output.count("Back to the main menu (Y/N): "), 1)

    def test_return_prompt_repeats_until_valid(self):
        _, output = self.run_menu("1", "Bob", "maybe", "", "n")
        self.assertEqual(output.count("Back to the main menu (Y/N): "), 3)
        self.assertEqual(output.count("Invalid Input!"), 2)
        self.assertEqual(output[-1], FAREWELL)

    def test_no_account_is_reported_once(self):
        _, output = self.run_menu("2", "N")
        self.assertEqual(
            output.count("No account registered yet. Please register an account name first."), 1)
        self.assertNotIn("Deposit Amount: ", output)

    def test_missing_rate_aborts_exchange(self):
        _, output = self.run_menu("1", "Alice", "Y", "4", "3", "N")
        self.assertIn(
            "Exchange rate for selected currency is not recorded yet. "
            "Please record the exchange rate first.", output)
        self.assertNotIn("Source Amount: ", output)

    def test_record_then_exchange(self):
        _, output = self.run_menu(
            "1", "Alice", "Y",
            "5", "2", "58.00", "Y",
            "5", "3", "0.40", "Y",
            "4", "2", "100", "3", "N", "N",
        )
        self.assertIn("Exchanged Amount: 14500.00 GBP", output)

    def test_second_registration_keeps_first_name(self):
        session = Session()
        console, output = scripted("1", "Alice", "Y", "1", "N")
        controller = MenuController(session, console)
        names = []
        original_close = session.close

        def close():
            names.append(session.account.name)
            original_close()

        session.close = close
        controller.run()
        self.assertEqual(names, ["Alice"])
        self.assertIn("An account already exists.", output)

    def test_end_of_input_exits(self):
        session, output = self.run_menu()
        self.assertEqual(output[-1], FAREWELL)
        self.assertTrue(session.closed)


if __name__ == "__main__":
    unittest.main()
