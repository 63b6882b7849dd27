from zkp_mock.main import run

run()
